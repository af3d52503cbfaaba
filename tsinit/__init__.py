"""tsconfig-init: interactive tsconfig.json generator.

``run`` is resolved lazily so that the process entry point can report a
failure to load it the same way as any other failure.
"""

__all__: list[str] = ["run"]


def __getattr__(name: str):
    if name == "run":
        from tsinit.cli_main import run

        return run
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
