"""Demo experiments, discovered automatically.

Every subpackage is one experiment whose ``__init__.py`` imports a runner
decorated with ``@ExperimentRegistry.register``; importing this package
registers all of them.
"""

import importlib
import pkgutil

for _, name, is_pkg in pkgutil.iter_modules(__path__):
    if is_pkg:
        importlib.import_module(f'.{name}', __package__)
