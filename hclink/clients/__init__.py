from hclink.clients.refresh import EventKind, RefreshEvent, RefreshLoop
from hclink.clients.session import Session, SessionState

__all__ = ["EventKind", "RefreshEvent", "RefreshLoop", "Session", "SessionState"]
