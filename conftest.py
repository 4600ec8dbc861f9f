"""Root pytest configuration: enable the package's own fixtures for its test suite."""

pytest_plugins = ["lib_catch_exception.plugin"]
