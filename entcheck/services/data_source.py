import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from config import settings

logger = logging.getLogger(__name__)


class ByteSource(ABC):
    """Abstract interface for whatever hands the engine its bytes."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def read(self) -> bytes:
        pass


class FileSource(ByteSource):
    def __init__(self, path):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    def read(self) -> bytes:
        data = self.path.read_bytes()
        logger.debug("read %d bytes from %s", len(data), self.path)
        return data


class StreamSource(ByteSource):
    def __init__(self, stream, name: str = "stdin", chunk_size: int | None = None):
        # text streams such as sys.stdin carry the binary stream underneath
        self.stream = getattr(stream, "buffer", stream)
        self._name = name
        self.chunk_size = chunk_size or settings.read_chunk_size

    @property
    def name(self) -> str:
        return self._name

    def read(self) -> bytes:
        chunks = []
        while True:
            chunk = self.stream.read(self.chunk_size)
            if not chunk:
                break
            chunks.append(chunk)
        data = b"".join(chunks)
        logger.debug("read %d bytes from %s", len(data), self._name)
        return data


class MemorySource(ByteSource):
    def __init__(self, data, name: str = "<memory>"):
        self.data = bytes(data)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def read(self) -> bytes:
        return self.data


class ByteSourceFactory:

    @staticmethod
    def create(target=None) -> ByteSource:
        if isinstance(target, ByteSource):
            return target
        if target is None or (isinstance(target, str) and target == "-"):
            return StreamSource(sys.stdin)
        if isinstance(target, (str, Path)):
            return FileSource(target)
        if isinstance(target, (bytes, bytearray, memoryview)):
            return MemorySource(target)
        raise ValueError(f"Unsupported input type: {type(target)}")
