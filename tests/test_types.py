import pytest

from exmweb.types import ExtensionState, ExtensionType, InstallButtonState


@pytest.mark.parametrize(
    "value, member",
    [
        (1, ExtensionState.ENABLED),
        (2, ExtensionState.DISABLED),
        (3, ExtensionState.ERROR),
        (4, ExtensionState.OUT_OF_DATE),
        (5, ExtensionState.DOWNLOADING),
        (6, ExtensionState.INITIALIZED),
        (99, ExtensionState.UNINSTALLED),
    ],
)
def test_extension_state_lookup(value, member):
    assert ExtensionState(value) is member


def test_extension_state_gap_is_invalid():
    with pytest.raises(ValueError):
        ExtensionState(7)


def test_extension_type_lookup():
    assert ExtensionType(1) is ExtensionType.SYSTEM
    assert ExtensionType(2) is ExtensionType.PER_USER


def test_extension_type_rejects_unknown():
    with pytest.raises(ValueError):
        ExtensionType(0)


def test_install_button_state_round_trip():
    for member in InstallButtonState:
        assert InstallButtonState(int(member)) is member


def test_install_button_state_order():
    ordered = [InstallButtonState(value) for value in (0, 1, 2)]
    assert ordered == [
        InstallButtonState.DEFAULT,
        InstallButtonState.INSTALLED,
        InstallButtonState.UNSUPPORTED,
    ]
    assert sorted(InstallButtonState) == ordered