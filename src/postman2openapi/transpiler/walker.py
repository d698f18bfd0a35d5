"""Recursive traversal of the collection item tree."""

import logging
from collections.abc import Sequence

from postman2openapi.openapi.models import Tag
from postman2openapi.parser.base import Item

from .context import WalkContext
from .operation import OperationBuilder
from .variables import VariableResolver

logger = logging.getLogger(__name__)


class HierarchyWalker:
    """Visits folders and requests in input order.

    Every folder is recorded as a tag, and its name is added to the tag
    stack seen by the requests beneath it.
    """

    def __init__(self, resolver: VariableResolver, builder: OperationBuilder | None = None):
        self.resolver = resolver
        self.builder = builder or OperationBuilder(resolver)

    def walk(self, items: Sequence[Item], context: WalkContext, tags: tuple[str, ...] = ()) -> None:
        for item in items:
            if item.is_folder:
                self._visit_folder(item, context, tags)
            else:
                self.builder.build(item, context, tags)

    def _visit_folder(self, item: Item, context: WalkContext, tags: tuple[str, ...]) -> None:
        name = item.name or "<folder>"
        description = None
        if item.description is not None:
            description = self.resolver.resolve(item.description)
        context.spec.tags.append(Tag(name=name, description=description))

        logger.debug("Entering folder %s (depth %d)", name, len(tags) + 1)
        self.walk(item.item, context, tags + (name,))
