from hclink.transports.base import HubTransport
from hclink.transports.rest import RestTransport

__all__ = ["HubTransport", "RestTransport"]
