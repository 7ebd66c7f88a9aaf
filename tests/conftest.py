"""Shared pytest setup for the mxids tests.

The property tests here draw server names, localparts and whole identifier
strings, so their cost is dominated by the authority parser. Example counts
are set once, per Hypothesis profile:

- dev: 300 examples per property (authority parsing, byte-length and sigil
  checks, canonical rendering, generation re-validation)
- ci: 60 examples, derandomized so a failing seed reproduces from the log
- verbose: 100 examples with per-example output, for reading shrink traces

Select a profile with HYPOTHESIS_PROFILE=<name>. Without it, CI=true picks
"ci" and anything else picks "dev".

Tests marked ``fuzz`` feed arbitrary text to every identifier parser. They
are skipped unless selected with ``pytest -m fuzz`` or by naming
tests/test_identifier_fuzzing.py on the command line.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=300, phases=_PHASES)
settings.register_profile(
    "ci",
    max_examples=60,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)

_PROFILES = frozenset({"dev", "ci", "verbose"})
_FUZZ_MODULE = "test_identifier_fuzzing"


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


def pytest_configure(config: pytest.Config) -> None:
    """Declare the ``fuzz`` marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: arbitrary-text parser runs, skipped unless selected",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip ``fuzz`` tests unless the run asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    if any(_FUZZ_MODULE in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="parser fuzzing; select with -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
