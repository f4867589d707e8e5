import pytest

from graphkit.shortest_path import main


def _output(capsys):
    assert main([]) == 0
    return capsys.readouterr().out


def test_header_names_start_and_end(capsys):
    out = _output(capsys)
    assert out.splitlines()[0] == "Kürzester Weg von Berlin nach München:"


def test_route_avoids_frankfurt(capsys):
    out = _output(capsys)
    route = out.splitlines()[1]
    assert route == "Berlin -> Hannover -> München"


def test_total_distance_matches_final_listing(capsys):
    out = _output(capsys)
    total = next(line for line in out.splitlines() if line.startswith("Gesamtdistanz"))
    assert total == "Gesamtdistanz: 848 km"
    assert "  Berlin -> München: 848 km" in out


def test_direct_roads_listed_with_their_length(capsys):
    out = _output(capsys)
    assert "  Berlin -> Berlin: 0 km" in out
    assert "  Berlin -> Hamburg: 288 km" in out
    assert "  Berlin -> Hannover: 248 km" in out


def test_every_city_listed_once(capsys):
    out = _output(capsys)
    listing = [line for line in out.splitlines() if line.startswith("  Berlin -> ")]
    assert len(listing) == 5
    targets = [line.split(" -> ")[1].split(":")[0] for line in listing]
    assert targets == ["Berlin", "Hamburg", "Hannover", "Frankfurt", "München"]


def test_unknown_argument_rejected():
    with pytest.raises(SystemExit) as info:
        main(["extra"])
    assert info.value.code == 2