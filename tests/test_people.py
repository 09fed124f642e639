"""Tests for the oldest-person lesson."""

import pytest

from lessons import people
from lessons.config import AppConfig
from lessons.people import EmptySequenceError, Person, effective_age, find_oldest
from tasks import task1


def test_fixed_input_picks_bob():
    oldest = find_oldest(people.PERSONS)
    assert oldest == Person("Bob", age=29)


def test_all_ages_absent_returns_first():
    alice, carol = Person("Alice"), Person("Carol")
    assert find_oldest([alice, carol]) is alice


def test_missing_age_counts_as_zero():
    assert effective_age(Person("Alice")) == 0
    assert effective_age(Person("Bob", 29)) == 29
    assert Person("Alice").age is None


def test_empty_sequence_raises():
    with pytest.raises(EmptySequenceError):
        find_oldest([])
    with pytest.raises(ValueError):
        find_oldest(iter(()))


def test_accepts_any_iterable():
    gen = (p for p in [Person("A", 1), Person("B", 3), Person("C", 2)])
    assert find_oldest(gen).name == "B"


def test_task_harness(capsys):
    task1.run_tests(find_oldest)
    assert capsys.readouterr().out == "Task1 OK\n"


def test_main_prints_oldest(capsys):
    people.main()
    captured = capsys.readouterr()
    assert captured.out == "The oldest is: Person(name='Bob', age=29)\n"
    assert captured.err == ""


def test_main_debug_trace_goes_to_stderr(capsys):
    people.main(AppConfig(debug_log=True))
    captured = capsys.readouterr()
    assert captured.out == "The oldest is: Person(name='Bob', age=29)\n"
    assert "[Oldest]" in captured.err


def test_absent_age_renders_as_none():
    assert repr(Person("Alice")) == "Person(name='Alice', age=None)"
