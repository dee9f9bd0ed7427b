import io

import pytest

from firmkit.gears import Gear, GearSelector, main


def test_starts_in_neutral():
    selector = GearSelector()
    assert selector.state is Gear.NEUTRAL
    assert selector.prompt() == "State NEUTRAL - Enter Y to pass"


def test_full_cycle_returns_to_start():
    selector = GearSelector()
    for key in ("Y", "Z", "X"):
        assert selector.press(key)
    assert selector.state is Gear.NEUTRAL


def test_transitions():
    selector = GearSelector(Gear.DRIVE)
    assert selector.press("X")
    assert selector.state is Gear.NEUTRAL
    assert selector.press("Y")
    assert selector.state is Gear.REVERSE
    assert selector.press("Z")
    assert selector.state is Gear.DRIVE


@pytest.mark.parametrize("key", ["X", "Z", "y", "", "YY"])
def test_wrong_key_keeps_state(key):
    selector = GearSelector()
    assert not selector.press(key)
    assert selector.state is Gear.NEUTRAL


@pytest.mark.parametrize("gear", list(Gear))
def test_next_is_reached_by_key(gear):
    selector = GearSelector(gear)
    assert selector.press(gear.key)
    assert selector.state is gear.next
    assert selector.prompt().startswith(f"State {gear.next.name}")


def test_main_dialogue(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Y Q\nZ"))
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Starting!!!"
    assert lines[1] == "State NEUTRAL - Enter Y to pass"
    assert lines[2] == "State REVERSE - Enter Z to pass"
    assert lines[3] == "Error. Character must be Z"
    assert lines[-1] == "State DRIVE - Enter X to pass"