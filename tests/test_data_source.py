import io
import sys
import pytest
from pathlib import Path
from entcheck.services.data_source import ByteSourceFactory, FileSource, MemorySource, StreamSource


def test_file_source_reads_bytes(sample_file, random_buffer):
    source = FileSource(sample_file)
    assert source.read() == random_buffer
    assert source.name == str(sample_file)

def test_file_source_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSource(tmp_path / "nope.bin").read()

def test_file_source_directory(tmp_path):
    with pytest.raises(OSError):
        FileSource(tmp_path).read()

def test_stream_source_reads_in_chunks():
    stream = io.BytesIO(bytes(range(256)) * 3)
    source = StreamSource(stream, chunk_size=7)
    assert source.read() == bytes(range(256)) * 3
    assert source.name == "stdin"

def test_stream_source_unwraps_text_streams():
    text_stream = io.TextIOWrapper(io.BytesIO(b"\x00\xff\x80binary"))
    assert StreamSource(text_stream).read() == b"\x00\xff\x80binary"

def test_stream_source_empty_stream():
    assert StreamSource(io.BytesIO(b"")).read() == b""

@pytest.mark.parametrize("target", [None, "-"])
def test_factory_stdin(monkeypatch, target):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"piped")))
    source = ByteSourceFactory.create(target)
    assert isinstance(source, StreamSource)
    assert source.read() == b"piped"

@pytest.mark.parametrize("make_target", [str, Path])
def test_factory_files(sample_file, make_target):
    assert isinstance(ByteSourceFactory.create(make_target(sample_file)), FileSource)

@pytest.mark.parametrize("target", [b"abc", bytearray(b"abc"), memoryview(b"abc")])
def test_factory_memory(target):
    source = ByteSourceFactory.create(target)
    assert isinstance(source, MemorySource)
    assert source.read() == b"abc"

def test_factory_passes_sources_through():
    source = MemorySource(b"abc", name="x")
    assert ByteSourceFactory.create(source) is source

def test_factory_rejects_unknown_types():
    with pytest.raises(ValueError):
        ByteSourceFactory.create(42)
