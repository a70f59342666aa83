"""Tests for wirefit/registry.py: registration forms, lookup and isolation."""

import pytest

from wirefit.registry import ExperimentRegistry, InterpolatorRegistry, Registry


class ScratchRegistry(Registry):
    _items = {}
    _registry_label = "widget"


@pytest.fixture(autouse=True)
def empty_scratch_registry():
    ScratchRegistry._items = {}
    yield
    ScratchRegistry._items = {}


class Named:
    name = "named"


class TestRegister:

    def test_explicit_name(self):
        decorated = ScratchRegistry.register("explicit")(Named)
        assert decorated is Named
        assert ScratchRegistry.get("explicit") is Named

    def test_bare_decorator_uses_instance_name(self):
        ScratchRegistry.register(Named)
        assert ScratchRegistry.list_all() == ["named"]

    def test_empty_call_uses_instance_name(self):
        @ScratchRegistry.register()
        class WithProperty:
            @property
            def name(self):
                return "from_property"

        assert ScratchRegistry.get("from_property") is WithProperty

    @pytest.mark.parametrize("bad", [42, 1.5, ["x"]])
    def test_rejects_other_arguments(self, bad):
        with pytest.raises(TypeError, match="takes a name"):
            ScratchRegistry.register(bad)

    def test_later_registration_replaces_earlier(self):
        ScratchRegistry.register("dup")(Named)

        class Other:
            pass

        ScratchRegistry.register("dup")(Other)
        assert ScratchRegistry.get("dup") is Other


class TestLookup:

    def test_unknown_name_reports_label_and_choices(self):
        ScratchRegistry.register("b")(Named)
        ScratchRegistry.register("a")(Named)
        with pytest.raises(ValueError, match="Unknown widget: 'c'. Available: a, b"):
            ScratchRegistry.get("c")

    def test_names_sorted(self):
        for key in ("m", "z", "a"):
            ScratchRegistry.register(key)(Named)
        assert ScratchRegistry.list_all() == ["a", "m", "z"]

    def test_subclasses_keep_separate_tables(self):
        ScratchRegistry.register("scratch_only")(Named)
        assert "scratch_only" not in InterpolatorRegistry.list_all()
        assert "scratch_only" not in ExperimentRegistry.list_all()


class TestInterpolatorRegistry:

    def test_wirefit_available(self):
        import wirefit  # noqa: F401
        assert "wirefit" in InterpolatorRegistry.list_all()

    def test_create_forwards_keyword_arguments(self):
        interpolator = InterpolatorRegistry.create("wirefit", smoothing=0.2)
        assert interpolator.smoothing == 0.2
