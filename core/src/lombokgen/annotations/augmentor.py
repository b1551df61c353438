"""Attaches a compiled selection to generated classes."""

import logging

from lombokgen.annotations.selection import FeatureSelection
from lombokgen.common.exceptions import validation_error
from lombokgen.protocols.generated import AnnotatableProtocol


logger = logging.getLogger(__name__)


class ClassAugmentor:
    """Appends imports and annotation literals of a selection to a target.

    The selection is only read, so one augmentor can serve every checkpoint
    of a generation run. Augmenting the same target twice appends the
    entries twice.
    """

    def __init__(self, selection: FeatureSelection):
        self.selection = selection

    def augment(self, target: AnnotatableProtocol) -> None:
        """Append each selected feature's import and annotation, in selection order.

        Raises:
            LombokGenError: If the target cannot take imports and annotations
        """
        if not isinstance(target, AnnotatableProtocol):
            raise validation_error(
                "Augmentation target must provide add_imported_type() and add_annotation()",
                field="target",
                value=type(target).__name__,
            )

        for entry in self.selection:
            target.add_imported_type(entry.import_type)
            target.add_annotation(entry.annotation)

        logger.debug(
            f"Added {len(self.selection)} annotations to {getattr(target, 'type_name', type(target).__name__)}"
        )


def augment_class(selection: FeatureSelection, target: AnnotatableProtocol) -> None:
    ClassAugmentor(selection).augment(target)
