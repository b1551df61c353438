"""Unit tests for annotation rendering."""

from lombokgen.annotations.renderer import render_annotation


class TestRenderAnnotation:
    """Test suite for render_annotation."""

    def test_no_options_renders_bare_name(self):
        assert render_annotation("@Data") == "@Data"
        assert render_annotation("@Data", []) == "@Data"

    def test_single_option(self):
        assert render_annotation("@Accessors", ['prefix="get"']) == '@Accessors(prefix="get")'

    def test_options_are_joined_in_order(self):
        rendered = render_annotation("@ToString", ["callSuper=true", 'exclude={"id", "name"}'])
        assert rendered == '@ToString(callSuper=true, exclude={"id", "name"})'
