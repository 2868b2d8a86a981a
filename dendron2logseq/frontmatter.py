import logging

import yaml

logger = logging.getLogger(__name__)


def split_frontmatter_and_body(text: str):
    if text.startswith('---\n'):
        # Find the closing '---' line
        end_idx = text.find('\n---\n', 4)
        if end_idx != -1:
            yaml_str = text[4:end_idx]
            body = text[end_idx + 5:]
            return yaml_str, body
        if text.endswith('\n---'):
            # Front matter only, no body and no trailing newline
            return text[4:-4], ''
    return None, text


def parse_frontmatter(text: str, source: str = '<string>') -> dict:
    """Return the front matter of a note as a dict (empty if missing or invalid)."""
    yaml_str, _body = split_frontmatter_and_body(text)
    if yaml_str is None:
        return {}
    try:
        loaded = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        logger.warning(f"Error parsing YAML frontmatter in {source}: {e}")
        return {}
    if not isinstance(loaded, dict):
        return {}
    return loaded


def read_frontmatter(path: str) -> dict:
    with open(path, 'r', encoding='utf-8') as f:
        return parse_frontmatter(f.read(), source=path)


def remove_key_from_yaml(yaml_str: str, key: str) -> str:
    """Drop a top-level key (and its indented continuation lines) from YAML text."""
    kept = []
    skipping = False
    for line in yaml_str.splitlines():
        if skipping and line[:1] in (' ', '\t', '-') and line.strip():
            continue
        skipping = False
        if line.startswith(f'{key}:'):
            skipping = True
            continue
        kept.append(line)
    return '\n'.join(kept)


def strip_title(text: str) -> str:
    """Remove the `title` attribute from a note's front matter, body untouched."""
    yaml_str, body = split_frontmatter_and_body(text)
    if yaml_str is None:
        return text
    new_yaml = remove_key_from_yaml(yaml_str, 'title')
    if new_yaml == yaml_str:
        return text
    if not new_yaml.strip():
        return body
    return f"---\n{new_yaml}\n---\n{body}"
