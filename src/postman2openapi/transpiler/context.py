"""Mutable state shared by one transpile run."""

from dataclasses import dataclass, field

from postman2openapi.openapi.models import OpenApiSpec, Server


@dataclass
class WalkContext:
    """The document under construction and the operation-id registry.

    Owned by a single ``Transpiler.transpile`` call and passed down the walk.
    """

    spec: OpenApiSpec
    operation_ids: dict[str, int] = field(default_factory=dict)

    def add_server(self, url: str) -> bool:
        """Register a server URL unless an identical one exists."""
        if any(server.url == url for server in self.spec.servers):
            return False
        self.spec.servers.append(Server(url=url))
        return True

    def issue_operation_id(self, base: str) -> str:
        """Return ``base``, or ``base`` plus a running count once it is taken."""
        if base not in self.operation_ids:
            self.operation_ids[base] = 0
            return base
        self.operation_ids[base] += 1
        return f"{base}{self.operation_ids[base]}"
