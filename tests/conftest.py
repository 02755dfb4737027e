"""Global pytest configuration.

Registers the shared graph fixtures in ``tests.lib.algorithms.sample_graphs``
as a plugin so every test folder can use them. The module is not imported
here directly so pytest can apply assertion rewriting to it.
"""

from __future__ import annotations

from importlib.util import find_spec

pytest_plugins: list[str] = []
if find_spec("tests.lib.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.lib.algorithms.sample_graphs"]
