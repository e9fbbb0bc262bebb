import pytest

from batgpt.client.models import Exercise
from batgpt.exceptions import FetchError, GenerationError
from batgpt.solver.table import SolutionTable, build_solution_table, unique_ids


class StubFetcher:
    def __init__(self, fail=()):
        self.fail = set(fail)
        self.fetched = []

    def fetch_exercise(self, exercise_id):
        self.fetched.append(exercise_id)
        if exercise_id in self.fail:
            raise FetchError(exercise_id)
        return Exercise(exercise_id, f"statement {exercise_id}", f"code {exercise_id}")


class StubGenerator:
    def __init__(self, fail=()):
        self.fail = set(fail)
        self.generated = []

    def generate(self, exercise):
        self.generated.append(exercise.exercise_id)
        if exercise.exercise_id in self.fail:
            raise GenerationError(exercise.exercise_id)
        return f"solution {exercise.exercise_id}"


def test_table_is_read_only():
    source = {"sum3": "code"}
    table = SolutionTable(source)
    source["other"] = "later"

    assert dict(table) == {"sum3": "code"}
    with pytest.raises(TypeError):
        table["sum3"] = "changed"
    assert not hasattr(table, "update")


def test_unique_ids_keeps_order():
    assert unique_ids(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_each_exercise_solved_once():
    fetcher, generator = StubFetcher(), StubGenerator()

    table = build_solution_table(["sum3", "makes10", "sum3"], fetcher, generator)

    assert fetcher.fetched == ["sum3", "makes10"]
    assert generator.generated == ["sum3", "makes10"]
    assert dict(table) == {"sum3": "solution sum3", "makes10": "solution makes10"}


def test_fetch_failure_stops_before_generation():
    fetcher, generator = StubFetcher(fail={"sum3"}), StubGenerator()

    with pytest.raises(FetchError):
        build_solution_table(["sum3", "makes10"], fetcher, generator)
    assert generator.generated == []


def test_generation_failure_aborts_remaining():
    fetcher, generator = StubFetcher(), StubGenerator(fail={"a"})

    with pytest.raises(GenerationError):
        build_solution_table(["a", "b"], fetcher, generator)
    assert fetcher.fetched == ["a"]
