"""Build docs/index.html for GitHub Pages (PyScript / Pyodide).

Extracts the evaluator from passcheck/__init__.py via the ast module,
wraps it in a PyScript-powered HTML page, and writes to docs/.  The page
evaluates passwords entirely in the browser.

Usage:
    python build_docs.py
"""

import ast
from pathlib import Path

ROOT = Path(__file__).parent
SRC = ROOT / "passcheck" / "__init__.py"
OUT = ROOT / "docs" / "index.html"

PYSCRIPT_VERSION = "2024.9.2"

# Top-level names copied into the page, in definition order.
CORE_NAMES = [
    "Criterion",
    "Rule",
    "Tier",
    "SPECIAL_CHARACTERS",
    "_UPPER_RE",
    "_LOWER_RE",
    "_DIGIT_RE",
    "_SPECIAL_RE",
    "RULES",
    "NO_PASSWORD",
    "WEAK",
    "MODERATE",
    "STRONG",
    "VERY_STRONG",
    "TIERS",
    "tier_for_score",
    "Assessment",
    "evaluate",
]


# ── AST extraction ────────────────────────────────────────────────────────


def _defines(node: ast.stmt, name: str) -> bool:
    if isinstance(node, (ast.FunctionDef, ast.ClassDef)):
        return node.name == name
    if isinstance(node, ast.Assign):
        return any(isinstance(t, ast.Name) and t.id == name for t in node.targets)
    if isinstance(node, ast.AnnAssign):
        return isinstance(node.target, ast.Name) and node.target.id == name
    return False


def _extract(source: str, tree: ast.Module, name: str) -> str:
    """Return the source text of a top-level definition, decorators included."""
    lines = source.splitlines()
    for node in ast.iter_child_nodes(tree):
        if _defines(node, name):
            decorators = getattr(node, "decorator_list", [])
            start = decorators[0].lineno if decorators else node.lineno
            return "\n".join(lines[start - 1 : node.end_lineno])
    raise ValueError(f"{name!r} not found in source")


# ── Python code that runs inside PyScript ─────────────────────────────────

_PY_IMPORTS = """\
import logging
import re
from dataclasses import dataclass
from typing import Callable, NamedTuple

from pyscript import when, document

logger = logging.getLogger("passcheck")
"""

_PY_BROWSER = r'''
# ── DOM helpers ──

def update_strength(password):
    """Run evaluate and update all UI elements."""
    result_el = document.querySelector("#result")
    assessment = evaluate(password)

    if not password:
        result_el.style.display = "none"
        return

    result_el.style.display = "block"
    label_el = document.querySelector("#strengthLabel")
    label_el.textContent = assessment.label
    label_el.style.color = assessment.tier.color

    bar = document.querySelector("#strengthBar")
    bar.style.width = f"{assessment.score}%"
    bar.style.background = assessment.tier.bar_color

    html = ""
    for c in assessment.criteria:
        cls = "met" if c.met else "unmet"
        glyph = "&#10003;" if c.met else "&#10007;"
        html += f'<li class="{cls}">{glyph} {c.label}</li>'
    document.querySelector("#criteria").innerHTML = html


# ── Event handlers ──

@when("input", "#passwordInput")
def on_password_input(event):
    update_strength(event.target.value)


@when("click", "#toggleBtn")
def on_toggle(event):
    field = document.querySelector("#passwordInput")
    if field.type == "password":
        field.type = "text"
        event.target.textContent = "Hide"
    else:
        field.type = "password"
        event.target.textContent = "Show"


# ── Ready — hide loading overlay ──
document.querySelector("#loading-overlay").style.display = "none"
'''


# ── HTML template ─────────────────────────────────────────────────────────
# Uses __PYSCRIPT_VERSION__ and __PYSCRIPT_CODE__ as placeholders
# (no f-strings or .format to avoid escaping CSS/JS braces).

HTML_TEMPLATE = r'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Password Checker</title>
    <link rel="stylesheet" href="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.css">
    <script type="module" src="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.js"></script>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }

        body {
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            padding: 1rem;
            background: linear-gradient(135deg, #f8fafc, #f1f5f9);
            font-family: -apple-system, 'Segoe UI', sans-serif;
            color: #1e293b;
        }

        #loading-overlay {
            position: fixed;
            inset: 0;
            z-index: 9999;
            background: #f8fafc;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 0.85rem;
            color: #64748b;
        }

        .card {
            width: 100%;
            max-width: 28rem;
            background: #fff;
            border-radius: 1rem;
            box-shadow: 0 20px 40px rgba(15, 23, 42, 0.08);
            padding: 2rem;
        }
        h1 { font-size: 1.75rem; text-align: center; }
        .subtitle { text-align: center; color: #475569; margin-bottom: 1.5rem; }

        label { display: block; font-size: 0.875rem; font-weight: 500; margin-bottom: 0.5rem; }
        .field { display: flex; gap: 0.5rem; }
        .field input {
            flex: 1;
            padding: 0.75rem 1rem;
            border: 1px solid #cbd5e1;
            border-radius: 0.5rem;
            font-size: 1rem;
        }
        .field button {
            padding: 0 0.9rem;
            border: 1px solid #cbd5e1;
            border-radius: 0.5rem;
            background: #f8fafc;
            cursor: pointer;
        }

        #result { display: none; margin-top: 1rem; }
        .summary { display: flex; justify-content: space-between; font-size: 0.875rem; }
        #strengthLabel { font-weight: 600; }
        .track { height: 0.5rem; background: #e5e7eb; border-radius: 9999px; overflow: hidden; margin: 0.5rem 0 1rem; }
        #strengthBar { height: 100%; width: 0; transition: width 0.3s ease-out; }

        .checklist { background: #f8fafc; border-radius: 0.5rem; padding: 1rem; }
        .checklist h3 { font-size: 0.875rem; margin-bottom: 0.75rem; }
        #criteria { list-style: none; font-size: 0.875rem; }
        #criteria li { margin: 0.25rem 0; }
        #criteria .met { color: #15803d; }
        #criteria .unmet { color: #475569; }

        .tips {
            margin-top: 1.5rem;
            background: #eff6ff;
            border: 1px solid #bfdbfe;
            border-radius: 0.5rem;
            padding: 1rem;
            font-size: 0.75rem;
            color: #1e40af;
        }
        .tips h4 { font-size: 0.875rem; color: #1e3a8a; margin-bottom: 0.25rem; }
        .tips ul { padding-left: 1rem; }
        .footer { text-align: center; margin-top: 1.5rem; font-size: 0.875rem; color: #475569; }
    </style>
</head>
<body>
    <div id="loading-overlay">Loading Python runtime&hellip;</div>

    <div>
        <div class="card">
            <h1>Password Checker</h1>
            <p class="subtitle">Test your password strength</p>

            <label for="passwordInput">Enter Password</label>
            <div class="field">
                <input id="passwordInput" type="password" placeholder="Type your password..." autocomplete="off">
                <button id="toggleBtn" type="button">Show</button>
            </div>

            <div id="result">
                <div class="summary">
                    <span>Strength:</span>
                    <span id="strengthLabel"></span>
                </div>
                <div class="track"><div id="strengthBar"></div></div>
                <div class="checklist">
                    <h3>Password Requirements:</h3>
                    <ul id="criteria"></ul>
                </div>
            </div>

            <div class="tips">
                <h4>Security Tips</h4>
                <ul>
                    <li>Use a unique password for each account</li>
                    <li>Avoid common words and personal information</li>
                    <li>Consider using a password manager</li>
                    <li>Enable two-factor authentication when possible</li>
                </ul>
            </div>
        </div>
        <p class="footer">Your password is never sent or stored anywhere</p>
    </div>

    <script type="py">
__PYSCRIPT_CODE__
    </script>
</body>
</html>
'''


# ── Build ─────────────────────────────────────────────────────────────────


def build(out: Path = OUT) -> None:
    source = SRC.read_text(encoding="utf-8")
    tree = ast.parse(source)

    core = "\n\n".join(_extract(source, tree, name) for name in CORE_NAMES)

    py_code = (
        _PY_IMPORTS
        + "\n# ── Core logic (extracted from passcheck/__init__.py) ──\n\n"
        + core + "\n"
        + _PY_BROWSER
    )

    html = (
        HTML_TEMPLATE
        .replace("__PYSCRIPT_VERSION__", PYSCRIPT_VERSION)
        .replace("__PYSCRIPT_CODE__", py_code)
    )

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    print(f"Built {out}  ({len(html):,} bytes)")


if __name__ == "__main__":
    build()
