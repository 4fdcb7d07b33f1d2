"""Case file resource operations."""

from typing import Any, Awaitable

from ..http_clients.connector import Connector
from ..http_clients.response import ResponseEnvelope


class CaseFiles:
    """Case file endpoints of the Penneo API."""
    
    def __init__(self, connector: Connector):
        self.connector = connector
    
    def list(self) -> Awaitable[ResponseEnvelope]:
        return self.connector.get('casefiles')
    
    def find(self, casefile_id: Any) -> Awaitable[ResponseEnvelope]:
        return self.connector.get(f'casefile/{casefile_id}')
