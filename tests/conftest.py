pytest_plugins = [
    "tests.fixtures.imagekit_fixtures",
]
