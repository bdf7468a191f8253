# tests/test_session.py

import pytest

import ethiocal.api
from ethiocal import CalendarDate, CalendarSession, Era
from ethiocal.core.errors import InvalidEraError, UnsetDateError


def test_fresh_session_is_unset():
    s = CalendarSession()
    assert not s.is_date_set()
    assert not s.is_era_set()
    assert s.get_era() is Era.UNSET
    with pytest.raises(UnsetDateError):
        s.get_date()


@pytest.mark.parametrize("call", [
    "ethiopic_to_gregorian",
    "gregorian_to_ethiopic",
    "coptic_to_gregorian",
    "gregorian_to_coptic",
    "ethiopic_to_jdn",
    "coptic_to_jdn",
])
def test_implicit_date_requires_set_date(call):
    s = CalendarSession()
    with pytest.raises(UnsetDateError):
        getattr(s, call)()


def test_session_date_conversions():
    s = CalendarSession()
    s.set_date(2008, 1, 1)
    assert s.is_date_set()
    assert s.ethiopic_to_gregorian() == CalendarDate(2015, 9, 12)
    assert s.ethiopic_to_jdn() == 2457278

    s.set_date(1732, 1, 1)
    assert s.coptic_to_gregorian() == CalendarDate(2015, 9, 12)
    assert s.coptic_to_jdn() == 2457278

    s.set_date(2015, 9, 11)
    assert s.gregorian_to_ethiopic() == CalendarDate(2007, 13, 6)
    assert s.gregorian_to_coptic() == CalendarDate(1731, 13, 6)

    s.unset_date()
    with pytest.raises(UnsetDateError):
        s.ethiopic_to_gregorian()


def test_constructor_sets_date_and_era():
    s = CalendarSession(7508, 1, 1, Era.AMETE_ALEM)
    assert s.get_date() == CalendarDate(7508, 1, 1)
    assert s.get_date().era is Era.AMETE_ALEM
    assert s.ethiopic_to_gregorian() == CalendarDate(2015, 9, 12)


def test_session_era_applies_to_implicit_conversions():
    s = CalendarSession()
    s.set_era(Era.AMETE_ALEM)
    assert s.ethiopic_to_gregorian(7508, 1, 1) == CalendarDate(2015, 9, 12)
    assert s.jdn_to_ethiopic(2457278) == CalendarDate(7508, 1, 1)
    assert s.ethiopic_to_jdn(7508, 1, 1) == 2457278
    # Gregorian -> Ethiopic guesses from the JDN regardless of session era
    assert s.gregorian_to_ethiopic(2015, 9, 12) == CalendarDate(2008, 1, 1)
    assert s.get_era() is Era.AMETE_ALEM


def test_conversions_do_not_mutate_state():
    s = CalendarSession()
    s.ethiopic_to_gregorian(0, 1, 1)
    s.ethiopic_to_gregorian(2008, 1, 1)
    s.gregorian_to_coptic(2015, 9, 12)
    assert not s.is_era_set()
    assert not s.is_date_set()


@pytest.mark.parametrize("bad", [Era.COPTIC, Era.GREGORIAN, 0, 42])
def test_invalid_era_leaves_state_unchanged(bad):
    s = CalendarSession()
    with pytest.raises(InvalidEraError):
        s.set_era(bad)
    assert not s.is_era_set()

    s.set_era(Era.AMETE_MIHRET)
    with pytest.raises(InvalidEraError):
        s.set_era(bad)
    assert s.get_era() is Era.AMETE_MIHRET


def test_no_direct_alem_mihret_transition():
    s = CalendarSession()
    s.set_era(Era.AMETE_ALEM)
    with pytest.raises(InvalidEraError):
        s.set_era(Era.AMETE_MIHRET)
    assert s.get_era() is Era.AMETE_ALEM
    s.set_era(Era.AMETE_ALEM)
    s.unset_era()
    s.set_era(Era.AMETE_MIHRET)
    assert s.get_era() is Era.AMETE_MIHRET


def test_explicit_era_is_scoped_to_the_call():
    s = CalendarSession()
    assert s.ethiopic_to_gregorian(7508, 1, 1, Era.AMETE_ALEM) == CalendarDate(2015, 9, 12)
    assert not s.is_era_set()

    e = s.gregorian_to_ethiopic(2015, 9, 12, Era.AMETE_ALEM)
    assert e == CalendarDate(7508, 1, 1)
    assert e.era is Era.AMETE_ALEM
    assert not s.is_era_set()


def test_scoped_era_restored_when_conversion_fails(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(ethiocal.api, "from_jdn", boom)
    s = CalendarSession()
    with pytest.raises(RuntimeError):
        s.ethiopic_to_gregorian(2008, 1, 1, Era.AMETE_MIHRET)
    assert not s.is_era_set()

    monkeypatch.setattr(ethiocal.api, "to_jdn", boom)
    with pytest.raises(RuntimeError):
        s.gregorian_to_ethiopic(2015, 9, 12, Era.AMETE_ALEM)
    assert not s.is_era_set()


def test_scoped_era_rejected_when_other_era_is_set():
    s = CalendarSession()
    s.set_era(Era.AMETE_MIHRET)
    with pytest.raises(InvalidEraError):
        s.ethiopic_to_gregorian(7508, 1, 1, Era.AMETE_ALEM)
    assert s.get_era() is Era.AMETE_MIHRET


def test_partial_date_arguments():
    s = CalendarSession()
    with pytest.raises(TypeError):
        s.ethiopic_to_gregorian(2008, 1)


def test_unset_clears_everything():
    s = CalendarSession(2008, 1, 1, Era.AMETE_MIHRET)
    s.unset()
    assert not s.is_date_set()
    assert not s.is_era_set()
