"""Simulator factory resolution tests."""

from __future__ import annotations

import pytest

from fake_sim import FakeProgram
from mips_dbg.simulator import SimulatorLoadError, SimulatorProgram, load_program_factory


def test_factory_spec_resolves_attribute():
    assert load_program_factory("fake_sim:FakeProgram") is FakeProgram


@pytest.mark.parametrize(
    "spec, fragment",
    [
        ("fake_sim", "module:attr"),
        (":FakeProgram", "module:attr"),
        ("no_such_simulator_mod:Program", "cannot import"),
        ("fake_sim:Missing", "no attribute"),
        ("fake_sim:NOT_CALLABLE", "not callable"),
    ],
)
def test_bad_factory_specs(spec, fragment):
    with pytest.raises(SimulatorLoadError, match=fragment):
        load_program_factory(spec)


def test_base_program_requires_implementation():
    with pytest.raises(NotImplementedError):
        SimulatorProgram().step()
