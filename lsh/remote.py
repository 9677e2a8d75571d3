"""Attach the shell's standard streams to a remote TCP server."""

import ipaddress
import os
import socket
import struct
import sys

from loguru import logger

from lsh.config import SEND_TIMEOUT


class RemoteError(Exception):
    """The shell could not be attached to the remote server."""


def connect_stdio(ip, port, send_timeout=SEND_TIMEOUT):
    """
    Connect to ip:port and make the socket the shell's stdin, stdout and stderr.
    Only dotted IPv4 addresses are accepted.
    """
    try:
        ipaddress.IPv4Address(ip)
    except ValueError:
        raise RemoteError("Invalid ip specified!") from None

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as e:
        raise RemoteError("Cannot create a socket!") from e

    with sock:
        try:
            # struct timeval: seconds, microseconds
            timeval = struct.pack("ll", send_timeout, 0)
        except struct.error as e:
            raise RemoteError(f"Invalid send timeout: {send_timeout}") from e
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_SNDTIMEO, timeval)
        try:
            sock.connect((ip, port))
        except (OSError, OverflowError) as e:
            logger.debug("connect to {}:{} failed: {}", ip, port, e)
            raise RemoteError("Cannot connect to the server!") from e

        print(f"Connected to {ip}:{port}")
        sys.stdout.flush()
        sys.stderr.flush()

        for fd in range(3):
            os.dup2(sock.fileno(), fd)
    logger.debug("stdio attached to {}:{}", ip, port)
