"""Tests for the CSV interaction repository and drug lookup."""

import logging

import pytest

from pathway_graph.adapters.graph import CSVDrugLookup, CSVInteractionRepository
from pathway_graph.config import GraphConfig
from pathway_graph.domain.errors import GraphError
from pathway_graph.domain.models import Edge


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_load_builds_graph_in_file_order(tmp_path):
    write(
        tmp_path / "interactions.csv",
        "source,target,weight\nA,B,2\nB,C,\nA,C,0.5\n",
    )

    graph = CSVInteractionRepository(GraphConfig(data_dir=tmp_path)).load()

    assert graph.vertices() == ["A", "B", "C"]
    assert graph.neighbors("A") == (Edge("B", 2.0), Edge("C", 0.5))
    # blank weight defaults to 1
    assert graph.neighbors("B") == (Edge("C", 1.0),)


def test_load_skips_rejected_rows_with_warning(tmp_path, caplog):
    write(
        tmp_path / "interactions.csv",
        "source,target,weight\n"
        "A,B,1\n"
        "A,A,1\n"
        "A,B,3\n"
        "B,C,heavy\n"
        ",C,1\n"
        "C,D,1\n",
    )
    caplog.set_level(logging.WARNING)

    graph = CSVInteractionRepository(GraphConfig(data_dir=tmp_path)).load()

    assert graph.edge_count == 2
    assert graph.neighbors("A") == (Edge("B", 1.0),)
    assert graph.has_edge("C", "D")
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 4


def test_load_without_weight_column(tmp_path):
    write(tmp_path / "interactions.csv", "source,target\nA,B\n")

    graph = CSVInteractionRepository(GraphConfig(data_dir=tmp_path)).load()

    assert graph.neighbors("A") == (Edge("B", 1.0),)


def test_load_missing_file_raises_graph_error(tmp_path):
    repository = CSVInteractionRepository(GraphConfig(data_dir=tmp_path))

    with pytest.raises(GraphError) as excinfo:
        repository.load()

    assert excinfo.value.file_path.endswith("interactions.csv")
    assert isinstance(excinfo.value.cause, OSError)


def test_load_non_utf8_file_raises_graph_error(tmp_path):
    (tmp_path / "interactions.csv").write_bytes(b"source,target\nA,\xff\xfeB\n")
    repository = CSVInteractionRepository(GraphConfig(data_dir=tmp_path))

    with pytest.raises(GraphError) as excinfo:
        repository.load()

    assert excinfo.value.file_path.endswith("interactions.csv")
    assert isinstance(excinfo.value.cause, UnicodeDecodeError)


def test_load_missing_columns_raises_graph_error(tmp_path):
    write(tmp_path / "interactions.csv", "from,to\nA,B\n")

    with pytest.raises(GraphError):
        CSVInteractionRepository(GraphConfig(data_dir=tmp_path)).load()


def test_each_load_returns_a_new_graph(tmp_path):
    write(tmp_path / "interactions.csv", "source,target\nA,B\n")
    repository = CSVInteractionRepository(GraphConfig(data_dir=tmp_path))

    first = repository.load()
    first.add_edge("B", "C")

    assert "C" not in repository.load()


def test_drug_lookup_is_case_insensitive(tmp_path):
    write(tmp_path / "drug_targets.csv", "drug,target\nAspirin,PTGS1\n")
    write(tmp_path / "drug_destinations.csv", "target,destination\nPTGS1,TBXA2R\n")

    lookup = CSVDrugLookup(GraphConfig(data_dir=tmp_path))

    assert lookup.target_for("  ASPIRIN ") == "PTGS1"
    assert lookup.destination_for("PTGS1") == "TBXA2R"
    assert lookup.target_for("ibuprofen") is None
    assert lookup.destination_for("EGFR") is None


def test_drug_lookup_missing_files_are_empty(tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    lookup = CSVDrugLookup(GraphConfig(data_dir=tmp_path))

    assert lookup.target_for("aspirin") is None
    assert lookup.destination_for("PTGS1") is None
    assert any("lookup table" in r.getMessage() for r in caplog.records)


def test_drug_lookup_non_utf8_file_is_empty(tmp_path, caplog):
    (tmp_path / "drug_targets.csv").write_bytes(b"drug,target\naspirin,\xff\xfePTGS1\n")
    caplog.set_level(logging.WARNING)
    lookup = CSVDrugLookup(GraphConfig(data_dir=tmp_path))

    assert lookup.target_for("aspirin") is None
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert [r.getMessage() for r in warnings] == ["Failed to load lookup table"]
    assert warnings[0].path.endswith("drug_targets.csv")


def test_drug_lookup_clear_cache_rereads(tmp_path):
    targets = write(tmp_path / "drug_targets.csv", "drug,target\naspirin,PTGS1\n")
    lookup = CSVDrugLookup(GraphConfig(data_dir=tmp_path))
    assert lookup.target_for("aspirin") == "PTGS1"

    write(targets, "drug,target\naspirin,PTGS2\n")
    assert lookup.target_for("aspirin") == "PTGS1"

    lookup.clear_cache()
    assert lookup.target_for("aspirin") == "PTGS2"
