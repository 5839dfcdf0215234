"""Writers for the generated project's package.json and README.md."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, TypedDict


class CustomizedInfo(TypedDict, total=False):
    """Metadata collected from the user.

    Only ``name`` and ``description`` are known here; any other key is merged
    into package.json as-is.
    """

    name: str
    description: str


README_TEMPLATE = """\
# {name}

[![Commitizen friendly](https://img.shields.io/badge/commitizen-friendly-brightgreen.svg)](http://commitizen.github.io/cz-cli/)
[![Build Status](https://travis-ci.com/pardjs/@pardjs/{name}.svg?branch=master)](https://travis-ci.com/pardjs/@pardjs/{name})
[![Coverage Status](https://coveralls.io/repos/github/pardjs/@pardjs/{name}/badge.svg?branch=master)](https://coveralls.io/github/pardjs/@pardjs/{name})

{description}

---

__Start README.md docs from here__

---

### Maintain

* submit a commit : `yarn commit`
* start test in watch : `yarn test:watch`
* build doc(GH pages) : `yarn build:doc`
* release project : `yarn release`
"""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name!r} in package.json")


def update_package_info(target_path: Path, update_info: Mapping[str, Any]) -> None:
    """Shallow-merge ``update_info`` into ``target_path/package.json``.

    Keys from ``update_info`` win; every other key, and the original key
    order, is preserved. Read, parse and write errors propagate unchanged;
    ``NaN`` and ``Infinity`` are rejected as they are not JSON.
    """
    pack_file_path = Path(target_path) / "package.json"
    package_info = json.loads(pack_file_path.read_text(encoding="utf-8"), parse_constant=_reject_constant)
    merged = {**package_info, **update_info}
    text = json.dumps(merged, indent=2, ensure_ascii=False, allow_nan=False)
    pack_file_path.write_text(text + "\n", encoding="utf-8")


def render_readme(update_info: Mapping[str, Any]) -> str:
    return README_TEMPLATE.format(name=update_info["name"], description=update_info["description"])


def build_readme_info(target_path: Path, update_info: Mapping[str, Any]) -> None:
    """Write the templated README.md into ``target_path``, replacing any existing one."""
    readme_path = Path(target_path) / "README.md"
    readme_path.write_text(render_readme(update_info), encoding="utf-8")


__all__ = ["CustomizedInfo", "README_TEMPLATE", "build_readme_info", "render_readme", "update_package_info"]
