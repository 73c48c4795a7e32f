"""Tests for the command-line interface."""

from pathlib import Path
from textwrap import dedent
from unittest.mock import patch

import pytest
from pytest import CaptureFixture

from wordbook.__main__ import main

DATASET: str = dedent(
    """\
    apple a round fruit
    zebra a striped animal
    mango a tropical fruit
    """
)
HEADER: str = dedent(
    """
    Wordbook
    Print "help" to see commands or "exit" to quit.
    """
).strip()


def check_main(
    capsys: CaptureFixture[str],
    arguments: list[str],
    user_commands: list[str] | None = None,
    expected_output: str | None = None,
) -> str:
    """Run Wordbook and check output.

    :return: captured standard output
    """

    if user_commands is None:
        user_commands = []

    with (
        patch("builtins.input", side_effect=user_commands),
        patch(
            "sys.argv",
            ["wordbook", "--use-input", "--interface", "terminal"]
            + arguments,
        ),
    ):
        main()

    captured = capsys.readouterr()
    if expected_output is not None:
        split_expected_output: list[str] = expected_output.splitlines()
        split_captured_output: list[str] = captured.out.splitlines()
        for expected_line, actual_line in zip(
            split_expected_output, split_captured_output
        ):
            assert expected_line.rstrip() == actual_line.rstrip()
        assert len(split_expected_output) == len(split_captured_output)

    return captured.out


@pytest.fixture(name="dataset_path")
def fixture_dataset_path(tmp_path: Path) -> Path:
    """Create monolingual dataset file."""

    dataset_path: Path = tmp_path / "dataset.txt"
    dataset_path.write_text(DATASET, encoding="utf-8")
    return dataset_path


def test_search_and_list(
    capsys: CaptureFixture[str], dataset_path: Path
) -> None:
    """Test searching words and listing the whole dictionary."""

    check_main(
        capsys,
        ["--dataset", str(dataset_path)],
        user_commands=["search apple", "search kiwi", "list", "exit"],
        expected_output=HEADER
        + "\n"
        + dedent(
            """\
            apple:
              - a round fruit
            Word not found: kiwi
            Dictionary Contents (Sorted):
            apple:
              - a round fruit
            mango:
              - a tropical fruit
            zebra:
              - a striped animal
            """
        ),
    )


def test_add(capsys: CaptureFixture[str], dataset_path: Path) -> None:
    """Test adding a new word and a new meaning of the existing word."""

    check_main(
        capsys,
        ["--dataset", str(dataset_path)],
        user_commands=[
            "add kiwi",  # Add new word.
            "a furry fruit",  # Enter the meaning.
            "add kiwi",  # Add the same word again.
            "y",  # Say "yes" for "Add another meaning?"
            "a bird",  # Enter the meaning.
            "add kiwi a small bird",  # Add the same word again.
            "n",  # Say "no" for "Add another meaning?"
            "search kiwi",
            "q",
        ],
        expected_output=HEADER
        + "\n"
        + dedent(
            """\
            Word added successfully.
            kiwi:
              - a furry fruit
            Word already exists in the dictionary. Add another meaning?
            [Y] Yes  [N] No
            Meaning added successfully.
            kiwi:
              - a bird
              - a furry fruit
            Word already exists in the dictionary. Add another meaning?
            [Y] Yes  [N] No
            kiwi:
              - a bird
              - a furry fruit
            """
        ),
    )


def test_add_with_definition(
    capsys: CaptureFixture[str], dataset_path: Path
) -> None:
    """Test adding a word with the definition in the same command."""

    check_main(
        capsys,
        ["--dataset", str(dataset_path)],
        user_commands=["add pear a sweet fruit", "search pear", "exit"],
        expected_output=HEADER
        + "\n"
        + dedent(
            """\
            Word added successfully.
            pear:
              - a sweet fruit
            """
        ),
    )


def test_execute(capsys: CaptureFixture[str], dataset_path: Path) -> None:
    """Test running single command."""

    check_main(
        capsys,
        ["--dataset", str(dataset_path), "execute", "search zebra"],
        expected_output="zebra:\n  - a striped animal\n",
    )


def test_unknown_command(
    capsys: CaptureFixture[str], dataset_path: Path
) -> None:
    """Test that unknown command does not stop the loop."""

    check_main(
        capsys,
        ["--dataset", str(dataset_path)],
        user_commands=["fly", "", "search mango", "exit"],
        expected_output=HEADER + "\nmango:\n  - a tropical fruit\n",
    )


def test_stat(capsys: CaptureFixture[str], dataset_path: Path) -> None:
    """Test hash table statistics."""

    output: str = check_main(
        capsys,
        ["--dataset", str(dataset_path), "--capacity", "1", "execute", "stat"],
    )

    lines: list[list[str]] = [line.split() for line in output.splitlines()]
    assert ["Entries", "3"] in lines
    assert ["Buckets", "1"] in lines
    assert ["Longest", "chain", "3"] in lines
    assert ["Load", "factor", "3.00"] in lines


def test_missing_dataset(tmp_path: Path) -> None:
    """Test that missing dataset stops the program."""

    with (
        patch("sys.argv", ["wordbook", "--dataset", str(tmp_path / "no")]),
        pytest.raises(SystemExit) as error,
    ):
        main()

    assert error.value.code == 1


def test_bilingual(capsys: CaptureFixture[str], tmp_path: Path) -> None:
    """Test bilingual dataset with word pairs."""

    dataset_path: Path = tmp_path / "en_fr.txt"
    dataset_path.write_text(
        "cat chat a small animal | un petit animal\n", encoding="utf-8"
    )

    check_main(
        capsys,
        [
            "--dataset",
            str(dataset_path),
            "--bilingual",
            "--from",
            "en",
            "--to",
            "fr",
        ],
        user_commands=[
            "search cat",
            "add cat chatte",
            "a female cat",
            "une chatte",
            "list",
            "exit",
        ],
        expected_output=HEADER
        + "\n"
        + dedent(
            """\
            Two words are required for a word pair.
            Word added successfully.
            Dictionary Contents (Sorted):
            cat / chat:
              - a small animal | un petit animal
            cat / chatte:
              - a female cat | une chatte
            """
        ),
    )


def test_add_keeps_definition_as_typed(
    capsys: CaptureFixture[str], dataset_path: Path
) -> None:
    """Test that spaces inside the definition are not collapsed."""

    check_main(
        capsys,
        ["--dataset", str(dataset_path)],
        user_commands=["add  kiwi  a  small   bird ", "search kiwi", "exit"],
        expected_output=HEADER
        + "\n"
        + dedent(
            """\
            Word added successfully.
            kiwi:
              - a  small   bird
            """
        ),
    )
