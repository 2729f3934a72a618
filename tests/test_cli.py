import json

from urlspell.cli import main

from .conftest import TRAINING_TEXT


def test_train_then_correct(tmp_path, capsys) -> None:
    src = tmp_path / "links.txt"
    src.write_text(TRAINING_TEXT, encoding="utf-8")
    model = tmp_path / "counts.json"

    assert main(["train", str(src), "--model", str(model)]) == 0
    assert json.loads(model.read_text(encoding="utf-8"))["url_counts"]["docs.rs"] == 1

    assert main(["correct", "DCOS.rs", "zzzzz", "--model", str(model)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["DCOS.rs -> docs.rs", "zzzzz -> (no correction)"]


def test_train_accumulates_unless_reset(tmp_path) -> None:
    src = tmp_path / "links.txt"
    src.write_text("https://docs.rs/", encoding="utf-8")
    model = tmp_path / "counts.json"

    main(["train", str(src), "--model", str(model)])
    main(["train", str(src), "--model", str(model)])
    assert json.loads(model.read_text(encoding="utf-8"))["url_counts"] == {"docs.rs": 2}

    main(["train", str(src), "--model", str(model), "--reset"])
    assert json.loads(model.read_text(encoding="utf-8"))["url_counts"] == {"docs.rs": 1}


def test_correct_without_model_fails(tmp_path) -> None:
    assert main(["correct", "docs.rs", "--model", str(tmp_path / "none.json")]) == 1


def test_train_missing_source_fails(tmp_path) -> None:
    model = tmp_path / "counts.json"

    assert main(["train", str(tmp_path / "none.txt"), "--model", str(model)]) == 1
    assert not model.exists()


def test_correct_with_invalid_alphabet_fails(tmp_path) -> None:
    model = tmp_path / "counts.json"
    model.write_text('{"alphabet": 5, "url_counts": {"docs.rs": 1}}', encoding="utf-8")

    assert main(["correct", "dcs.rs", "--model", str(model)]) == 1
