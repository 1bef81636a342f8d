import os.path
import tempfile
from typing import Generator, List

import pytest

SAMPLE_TEXT = "Lorem ipsum dolor sit amet,\r\nconsectetur adipiscing elit.\n"


@pytest.fixture(scope="function")
def sample_text_file() -> Generator[str, None, None]:
    with tempfile.TemporaryDirectory() as tmp_directory:
        file_path = os.path.join(tmp_directory, "sample.txt")
        with open(file_path, "w", newline="") as f:
            f.write(SAMPLE_TEXT)
        yield file_path


@pytest.fixture(scope="function")
def sample_files() -> Generator[List[str], None, None]:
    with tempfile.TemporaryDirectory() as tmp_directory:
        file_paths = []
        for file_name, content in [
            ("zeta.txt", b"last in alphabet, first in list"),
            ("alpha.bin", bytes(range(256))),
            ("middle.json", b'{"key": "value"}'),
        ]:
            file_path = os.path.join(tmp_directory, file_name)
            with open(file_path, "wb") as f:
                f.write(content)
            file_paths.append(file_path)
        yield file_paths
