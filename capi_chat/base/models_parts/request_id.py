"""
Request identifier shape.

Identifiers are generated by the transport from response headers; this layer
only carries them on completion records.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class RequestId:
    """Identifiers correlating a completion with its request.

    Attributes:
        header_request_id: Client-generated id sent in the request headers.
        completion_id: Server id of the completion.
        created: Server creation timestamp (epoch seconds).
        deployment_id: Model deployment that served the request.
        server_experiments: Experiment assignments reported by the server.
    """

    header_request_id: str
    completion_id: str = ""
    created: int = 0
    deployment_id: str = ""
    server_experiments: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the identifiers."""
        return asdict(self)


__all__ = ["RequestId"]
