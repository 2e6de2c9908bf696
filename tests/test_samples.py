import pytest

from reclayout.pipeline import compute_layout
from reclayout.samples import list_samples, load_sample, sample_path


def test_list_samples_has_descriptions():
    samples = list_samples()
    assert [s.name for s in samples] == ["DINC", "SALES", "SYSDATES"]
    assert all(s.description for s in samples)


def test_load_sample_is_case_insensitive():
    assert load_sample("dinc") == sample_path("DINC").read_text()


def test_unknown_sample_raises_key_error():
    with pytest.raises(KeyError):
        load_sample("NOPE")


@pytest.mark.parametrize("name, total", [("SYSDATES", 31), ("DINC", 118), ("SALES", 69)])
def test_samples_convert(name, total):
    layout = compute_layout(load_sample(name))
    assert layout.grand_total == total
