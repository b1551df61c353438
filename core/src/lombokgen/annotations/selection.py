"""Per-run selection of annotation features.

A FeatureSelection is built fresh by every compile, owns the option lists
of the features it contains, and is frozen before it is handed out. The
shared Feature records in the registry are never mutated, so several
generation sessions in one process cannot leak options into each other.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union

from lombokgen.annotations.registry import Feature
from lombokgen.annotations.renderer import render_annotation
from lombokgen.common.exceptions import selection_frozen_error


class SelectedFeature:
    """A feature as selected for one run, with its accumulated options."""

    def __init__(self, feature: Feature):
        self.feature = feature
        self._options: List[str] = []

    @property
    def key(self) -> str:
        return self.feature.key

    @property
    def name(self) -> str:
        return self.feature.name

    @property
    def import_type(self) -> str:
        return self.feature.import_type

    @property
    def options(self) -> Tuple[str, ...]:
        return tuple(self._options)

    @property
    def annotation(self) -> str:
        """The rendered annotation literal, e.g. ``@Builder(toBuilder=true)``."""
        return render_annotation(self.feature.name, self._options)

    def __repr__(self) -> str:
        return f"SelectedFeature({self.annotation!r})"


class FeatureSelection:
    """Ordered, de-duplicated set of features chosen for one generation run.

    Insertion order is the rendering order. Adding a feature that is already
    present keeps its original position.

    Example:
        >>> selection = FeatureSelection()
        >>> selection.add(BUILDER)
        >>> selection.add_option(BUILDER, "toBuilder=true")
        >>> selection.freeze()
        >>> [entry.annotation for entry in selection]
        ['@Builder(toBuilder=true)']
    """

    def __init__(self):
        self._entries: Dict[str, SelectedFeature] = {}
        self._frozen: bool = False

    def add(self, feature: Feature) -> SelectedFeature:
        """Select a feature, keeping its position if already selected.

        Raises:
            LombokGenError: If the selection is frozen
        """
        if self._frozen:
            raise selection_frozen_error(feature.key)
        entry = self._entries.get(feature.lookup_key)
        if entry is not None:
            return entry

        entry = SelectedFeature(feature)
        self._entries[feature.lookup_key] = entry
        return entry

    def add_option(self, feature: Feature, option: str) -> None:
        """Append a rendered ``key=value`` option to a feature, selecting it if needed.

        Raises:
            LombokGenError: If the selection is frozen
        """
        if self._frozen:
            raise selection_frozen_error(feature.key)
        self.add(feature)._options.append(option)

    def freeze(self) -> "FeatureSelection":
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get(self, feature: Union[Feature, str]) -> Optional[SelectedFeature]:
        key = feature.lookup_key if isinstance(feature, Feature) else feature.lower()
        return self._entries.get(key)

    def options(self, feature: Union[Feature, str]) -> Tuple[str, ...]:
        entry = self.get(feature)
        return entry.options if entry is not None else ()

    @property
    def features(self) -> List[Feature]:
        return [entry.feature for entry in self._entries.values()]

    def keys(self) -> List[str]:
        return [entry.key for entry in self._entries.values()]

    def annotations(self) -> List[str]:
        return [entry.annotation for entry in self._entries.values()]

    def imports(self) -> List[str]:
        return [entry.import_type for entry in self._entries.values()]

    def to_dict(self) -> Dict[str, List[str]]:
        """Map each selected feature key to its options, in selection order."""
        return {entry.key: list(entry.options) for entry in self._entries.values()}

    def __contains__(self, feature: object) -> bool:
        if isinstance(feature, (Feature, str)):
            return self.get(feature) is not None
        return False

    def __iter__(self) -> Iterator[SelectedFeature]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FeatureSelection({self.annotations()!r})"
