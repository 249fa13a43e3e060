import socket

FALLBACK_ADDRESS = "0.0.0.0"


def get_local_ip() -> str:
    """
    Returns the IPv4 address other machines on the network can reach us on,
    or 0.0.0.0 when the host has no external interface.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        # Connecting a UDP socket sends nothing, it only picks the outgoing interface.
        sock.connect(("10.255.255.255", 1))
        address = sock.getsockname()[0]
    except OSError:
        return FALLBACK_ADDRESS
    finally:
        sock.close()

    if address.startswith("127."):
        return FALLBACK_ADDRESS
    return address
