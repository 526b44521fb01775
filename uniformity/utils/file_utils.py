#!/usr/bin/env python3
"""
File utility functions for uniformity checking.

Handles reading project files and the rule file.
"""

import json
from pathlib import Path
from typing import Dict

from ..models import FileReadError, RuleConfigError


def get_file_content(file_path: Path) -> str:
    """Read a text file as UTF-8, raising FileReadError on any failure."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        raise FileReadError(file_path, "not valid UTF-8 text")
    except IsADirectoryError:
        raise FileReadError(file_path, "is a directory")
    except FileNotFoundError:
        raise FileReadError(file_path, "file disappeared before it could be read")
    except PermissionError:
        raise FileReadError(file_path, "permission denied")
    except OSError as e:
        raise FileReadError(file_path, e.strerror or str(e))


def load_json_file(json_file: Path) -> Dict:
    """Load a JSON document, raising RuleConfigError if it cannot be read or parsed."""
    try:
        with open(json_file, encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        raise RuleConfigError(f"Rule file not found: {json_file}")
    except json.JSONDecodeError as e:
        raise RuleConfigError(f"Invalid JSON in rule file {json_file}: {e}")
    except (UnicodeDecodeError, OSError) as e:
        raise RuleConfigError(f"Cannot read rule file {json_file}: {e}")
