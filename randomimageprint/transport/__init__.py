from .file import FileTransport
from .serial import SERIAL_BAUD_RATE, SerialTransport

__all__ = ["FileTransport", "SERIAL_BAUD_RATE", "SerialTransport"]
