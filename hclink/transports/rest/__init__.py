from hclink.transports.rest.transport import RestTransport

__all__ = ["RestTransport"]
