# msm/tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from msm.core.errors import (
    FileExportError,
    FileImportError,
    MachineImportError,
    MSMError,
    NullTransitionError,
    StateNotFoundError,
    TransitionError,
    TransitionInitializationError,
    TransitionNotFoundError,
    ValidationError,
    YAMLParseError,
)


@pytest.mark.parametrize(
    "error_class,parent",
    [
        (StateNotFoundError, MSMError),
        (TransitionError, MSMError),
        (NullTransitionError, TransitionError),
        (TransitionInitializationError, TransitionError),
        (TransitionNotFoundError, TransitionError),
        (ValidationError, MSMError),
        (MachineImportError, MSMError),
        (FileImportError, MachineImportError),
        (YAMLParseError, MachineImportError),
        (FileExportError, MSMError),
    ],
)
def test_error_hierarchy(error_class, parent) -> None:
    assert issubclass(error_class, parent)
    with pytest.raises(parent, match="boom"):
        raise error_class("boom")


def test_errors_are_exceptions() -> None:
    assert issubclass(MSMError, Exception)
