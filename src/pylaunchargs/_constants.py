"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Android instrumentation runner options
# ------------------------------------------------------------------

# Options consumed by ``am instrument`` itself before the app process
# starts.  Ref: https://developer.android.com/studio/test/command-line#AMOptionsSyntax
ANDROID_RESERVED_KEYS: frozenset[str] = frozenset(
    {
        "class",
        "package",
        "func",
        "unit",
        "size",
        "perf",
        "debug",
        "log",
        "emma",
        "coverageFile",
    }
)

ENV_PREFIX = "LAUNCHARGS_"
