"""Name-to-class lookup tables.

``InterpolatorRegistry`` holds reward interpolation schemes, keyed by each
scheme's ``name`` so the CLI can offer them as ``--interpolator`` choices.
``ExperimentRegistry`` holds experiment runners under the name given to
``run_experiment.py``.
"""


class Registry:
    """Class-level mapping from name to registered class.

    Every subclass declares its own ``_items = {}``; ``_registry_label``
    names the kind of thing stored, for lookup errors.

    ``register`` accepts a name (``@R.register("x")``), a class
    (``@R.register``) or nothing (``@R.register()``). Without a name, the
    key is the ``name`` of a default-constructed instance.
    """

    _items: dict[str, type] = {}
    _registry_label: str = "item"

    @classmethod
    def _add(cls, name: str, registered_cls: type) -> type:
        cls._items[name] = registered_cls
        return registered_cls

    @classmethod
    def register(cls, item_or_name=None):
        if isinstance(item_or_name, str):
            return lambda registered_cls: cls._add(item_or_name, registered_cls)
        if isinstance(item_or_name, type):
            return cls._add(item_or_name().name, item_or_name)
        if item_or_name is None:
            return lambda registered_cls: cls._add(registered_cls().name, registered_cls)
        raise TypeError(
            f"{cls.__name__}.register() takes a name, a class or nothing, "
            f"got {type(item_or_name).__name__}"
        )

    @classmethod
    def get(cls, name: str) -> type:
        try:
            return cls._items[name]
        except KeyError:
            raise ValueError(
                f"Unknown {cls._registry_label}: '{name}'. "
                f"Available: {', '.join(cls.list_all())}"
            ) from None

    @classmethod
    def list_all(cls) -> list[str]:
        """Registered names, sorted."""
        return sorted(cls._items)


class InterpolatorRegistry(Registry):
    _items = {}
    _registry_label = "interpolator"

    @classmethod
    def create(cls, name: str, **kwargs):
        """Construct the interpolator registered as ``name`` with ``kwargs``."""
        return cls.get(name)(**kwargs)


class ExperimentRegistry(Registry):
    _items = {}
    _registry_label = "experiment"

    @classmethod
    def get_all(cls) -> dict[str, type]:
        """Copy of the name-to-runner mapping."""
        return dict(cls._items)
