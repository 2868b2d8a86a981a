import os

import pytest

from dendron2logseq.vault import VaultBinding


def _write_note(root, name, title=None, body="Some text\n"):
    path = os.path.join(str(root), name)
    if title is None:
        content = body
    else:
        content = f"---\nid: {name[:-3]}\ntitle: {title}\ndesc: ''\n---\n{body}"
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return path


@pytest.fixture
def write_note():
    return _write_note


@pytest.fixture
def vault_dir(tmp_path):
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def graph_dir(tmp_path):
    return tmp_path / "graph"


@pytest.fixture
def binding(vault_dir, graph_dir):
    return VaultBinding(str(vault_dir), str(graph_dir), "daily")
