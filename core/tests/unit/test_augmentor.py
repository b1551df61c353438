"""Unit tests for ClassAugmentor."""

import pytest

from lombokgen.annotations.augmentor import ClassAugmentor, augment_class
from lombokgen.annotations.compiler import compile_configuration
from lombokgen.common.exceptions import LombokGenError
from lombokgen.types import TopLevelClass


class _HostClass:
    """Stand-in for a host-owned class representation."""

    def __init__(self):
        self.imports = []
        self.annotations = []

    def add_imported_type(self, import_type):
        self.imports.append(import_type)

    def add_annotation(self, annotation):
        self.annotations.append(annotation)


class TestClassAugmentor:
    """Test suite for ClassAugmentor."""

    def test_appends_imports_and_annotations_in_order(self):
        selection = compile_configuration({
            "allArgsConstructor": "true",
            "accessors": "true",
            "accessors.chain": "true",
        })
        target = TopLevelClass(type_name="com.example.User")
        ClassAugmentor(selection).augment(target)

        assert target.imported_types == [
            "lombok.Data",
            "lombok.AllArgsConstructor",
            "lombok.NoArgsConstructor",
            "lombok.experimental.Accessors",
        ]
        assert target.annotations == [
            "@Data",
            "@AllArgsConstructor",
            "@NoArgsConstructor",
            "@Accessors(chain=true)",
        ]

    def test_keeps_existing_entries(self):
        target = TopLevelClass(
            type_name="com.example.User",
            imported_types=["java.util.Date"],
            annotations=["@Deprecated"],
        )
        augment_class(compile_configuration({}), target)
        assert target.imported_types == ["java.util.Date", "lombok.Data"]
        assert target.annotations == ["@Deprecated", "@Data"]

    def test_augmenting_twice_duplicates_entries(self):
        target = TopLevelClass(type_name="com.example.User")
        augmentor = ClassAugmentor(compile_configuration({}))
        augmentor.augment(target)
        augmentor.augment(target)
        assert target.annotations == ["@Data", "@Data"]

    def test_accepts_any_annotatable_host_object(self):
        target = _HostClass()
        augment_class(compile_configuration({"builder": "true"}), target)
        assert target.imports == ["lombok.Data", "lombok.Builder"]
        assert target.annotations == ["@Data", "@Builder"]

    def test_rejects_non_annotatable_target(self):
        with pytest.raises(LombokGenError):
            augment_class(compile_configuration({}), object())
