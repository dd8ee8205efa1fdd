import logging

import pytest

from labeled_data import LabeledValue, LabeledValueFactory, NamedCollection, LOGGER_NAME


@pytest.fixture
def user_collection():
    """Collection with a username, an age and a real age."""
    return NamedCollection({
        'username': LabeledValue.of('James Chan'),
        'age': LabeledValue.of(24),
        'realAge': LabeledValue.of(25),
    })


@pytest.fixture
def described_collection():
    """Collection whose entries carry a 'public' metadata flag."""
    return NamedCollection({
        'username': LabeledValue.of('James Chan').set_metadata({'public': True}),
        'age': LabeledValue.of(24).set_metadata({'public': False}),
    })


@pytest.fixture
def default_metadata():
    return {'description': 'Default description.', 'readonly': True}


@pytest.fixture
def copying_factory(default_metadata):
    return LabeledValueFactory(default_metadata)


@pytest.fixture
def sharing_factory(default_metadata):
    return LabeledValueFactory(default_metadata, clone_metadata=False)


@pytest.fixture
def clean_package_logger():
    """Restore the package logger after a test installs handlers on it."""
    package_logger = logging.getLogger(LOGGER_NAME)
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield package_logger
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)
