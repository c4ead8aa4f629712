import io

import pytest

from oslabsim.allocation import (
    BEST_FIT_CEILING,
    Placement,
    best_fit,
    first_fit,
    format_placements,
    main,
    worst_fit,
)

BLOCKS = [100, 500, 200, 300, 600]
FILES = [212, 417, 112, 426]


def _check_consistent(blocks, files, placements):
    free = list(blocks)
    assert [p.file_size for p in placements] == files
    for placement in placements:
        if placement.placed:
            assert placement.block_size == free[placement.block]
            assert placement.file_size <= placement.block_size
            free[placement.block] -= placement.file_size
    assert all(size >= 0 for size in free)


@pytest.mark.parametrize("allocate", [first_fit, best_fit, worst_fit])
def test_placements_are_consistent(allocate):
    placements = allocate(BLOCKS, FILES)
    _check_consistent(BLOCKS, FILES, placements)


@pytest.mark.parametrize("allocate", [first_fit, best_fit, worst_fit])
def test_input_blocks_not_mutated(allocate):
    blocks = list(BLOCKS)
    allocate(blocks, FILES)
    assert blocks == BLOCKS


def test_first_fit_takes_first_block_with_room():
    placements = first_fit(BLOCKS, FILES)
    assert placements[0] == Placement(212, 1, 500)
    assert placements[1] == Placement(417, 4, 600)
    assert placements[2] == Placement(112, 1, 500 - 212)
    assert not placements[3].placed


def test_best_fit_places_every_file():
    placements = best_fit(BLOCKS, FILES)
    assert all(p.placed for p in placements)
    assert placements[0] == Placement(212, 3, 300)
    assert placements[3] == Placement(426, 4, 600)


def test_worst_fit_takes_largest_block():
    placements = worst_fit(BLOCKS, FILES)
    assert placements[0] == Placement(212, 4, 600)
    assert placements[2] == Placement(112, 4, 600 - 212)
    assert not placements[3].placed


def test_best_fit_ignores_blocks_beyond_ceiling():
    placements = best_fit([BEST_FIT_CEILING + 10], [10])
    assert not placements[0].placed


def test_best_fit_tie_prefers_lower_index():
    placements = best_fit([300, 300], [100])
    assert placements[0].block == 0


def test_worst_fit_tie_prefers_lower_index():
    placements = worst_fit([300, 300], [100])
    assert placements[0].block == 0


def test_exact_fit_is_allowed():
    placements = first_fit([50], [50, 1])
    assert placements[0] == Placement(50, 0, 50)
    assert not placements[1].placed


def test_format_placements():
    text = format_placements(first_fit(BLOCKS, FILES))
    lines = text.splitlines()
    assert lines[0] == "File size 212 is put in 500 partition"
    assert lines[-1] == "File size 426 must wait"


def test_main_reads_stdin(monkeypatch, capsys):
    data = "5 4\n100 500 200 300 600\n212 417 112 426\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main(["worst"]) == 0
    out = capsys.readouterr().out
    assert "Worst Fit" in out
    assert "File size 212 is put in 600 partition" in out
    assert "File size 426 must wait" in out


def test_main_short_input_exits(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n100\n"))
    with pytest.raises(SystemExit):
        main([])