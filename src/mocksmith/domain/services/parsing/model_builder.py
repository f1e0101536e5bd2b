#!/usr/bin/env python3

"""Traversal of a declaration tree into models of the classes to mock."""

import re

from ....infrastructure.logging import get_logger, log_timing
from ...models.entity import Entity, EntityKind
from ...models.mock import ClassModel, MethodsToMockStrategy
from .model_factory import ModelFactory

logger = get_logger(__name__)


class ModelBuilder:
    """Finds the classes to mock in the primary file of a translation unit.

    A builder caches the source text of the file it parses, so one builder
    must be used per translation unit.
    """

    def __init__(
        self,
        methods_to_mock: MethodsToMockStrategy = MethodsToMockStrategy.ALL_VIRTUAL,
        class_filter: str | re.Pattern[str] | None = None,
    ):
        """Initialize model builder.

        Args:
            methods_to_mock: Strategy selecting the methods (and thereby classes) to mock
            class_filter: Optional regex; only classes whose name it matches are modeled
        """
        self.methods_to_mock = methods_to_mock
        self.class_filter = re.compile(class_filter) if isinstance(class_filter, str) else class_filter
        self.factory = ModelFactory()

    @log_timing
    def classes_in_tree(self, root: Entity) -> list[ClassModel]:
        """Model every mockable class below the root, in declaration order.

        Args:
            root: Root entity of the parsed translation unit

        Returns:
            List of ClassModel objects with at least one method each
        """
        classes: list[ClassModel] = []
        self._traverse(root, [], classes)
        logger.debug(f"Found {len(classes)} classes to mock")
        return classes

    def _traverse(self, entity: Entity, namespace_stack: list[str], classes: list[ClassModel]) -> None:
        kind = entity.kind
        if kind is EntityKind.CLASS_DECLARATION:
            self._visit_class(entity, namespace_stack, classes)
        elif kind is EntityKind.NAMESPACE:
            namespace_stack.append(entity.name or "")

        for child in entity.children():
            if child.is_in_main_file():
                self._traverse(child, namespace_stack, classes)

        if kind is EntityKind.NAMESPACE:
            namespace_stack.pop()

    def _visit_class(self, entity: Entity, namespace_stack: list[str], classes: list[ClassModel]) -> None:
        if not entity.is_definition():
            logger.debug(f"Skipping forward declaration of {entity.name}")
            return
        name = entity.name or ""
        if self.class_filter is not None and not self.class_filter.search(name):
            logger.debug(f"Class {name} does not match class filter")
            return

        class_model = self.factory.class_from_entity(entity, namespace_stack, self.methods_to_mock)
        if class_model.methods:
            classes.append(class_model)
        else:
            logger.debug(f"Class {name} has no methods to mock")
