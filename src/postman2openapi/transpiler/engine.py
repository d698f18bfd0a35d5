"""Postman collection to OpenAPI transpiler."""

import logging

from postman2openapi.openapi.models import Info, OpenApiSpec
from postman2openapi.openapi.render import render
from postman2openapi.parser.base import Collection
from postman2openapi.parser.postman import parse_collection

from .context import WalkContext
from .variables import VariableResolver, build_variable_table
from .walker import HierarchyWalker

logger = logging.getLogger(__name__)


class Transpiler:
    """Converts one collection into an OpenAPI 3.0.3 document.

    The variable table is built from the collection's variable list before
    the walk and is not modified afterwards.
    """

    def __init__(self, collection: Collection):
        self.collection = collection
        self.variables = build_variable_table(collection.variable)
        self.resolver = VariableResolver(self.variables)

    def run(self) -> OpenApiSpec:
        spec = OpenApiSpec(
            info=Info(title=self.collection.info.name, description=self.collection.info.description),
        )
        context = WalkContext(spec=spec)
        HierarchyWalker(self.resolver).walk(self.collection.item, context)

        spec.paths = dict(sorted(spec.paths.items()))
        logger.info(
            "Transpiled %r: %d paths, %d servers, %d tags",
            spec.info.title, len(spec.paths), len(spec.servers), len(spec.tags),
        )
        return spec

    @classmethod
    def transpile(cls, collection: Collection) -> OpenApiSpec:
        return cls(collection).run()


def transpile(collection: Collection) -> OpenApiSpec:
    """Transpile a parsed collection into an OpenAPI document."""
    return Transpiler.transpile(collection)


def transpile_text(text: str, fmt: str = "yaml") -> str:
    """Transpile collection JSON text and render the result as ``fmt``."""
    return render(transpile(parse_collection(text)), fmt)
