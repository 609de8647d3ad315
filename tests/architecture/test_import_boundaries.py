"""
Import-boundary enforcement for the two packages.

1. Kernel independence   -- currency_kernel/** may not import currency_config
                             or the YAML parser.
2. Domain purity         -- currency_kernel/domain/** may not read the process
                             environment.
3. Config centralisation -- only currency_config/__init__.py may import the
                             loader sub-module.
4. CLDR confinement      -- Babel is imported only by the number format module.

All scanning is done via AST; these tests are read-only.
"""

import ast
import glob
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _python_files(root: str) -> list[Path]:
    """Return all .py files under *root*, sorted for deterministic order."""
    pattern = str(REPO_ROOT / root / "**" / "*.py")
    return sorted(Path(p) for p in glob.glob(pattern, recursive=True))


def _parse(filepath: Path) -> ast.AST | None:
    try:
        return ast.parse(filepath.read_text(encoding="utf-8"), filename=str(filepath))
    except (SyntaxError, UnicodeDecodeError):
        return None


def _extract_imports(filepath: Path) -> list[tuple[int, str]]:
    """Return (line_number, module_string) for every import in *filepath*."""
    tree = _parse(filepath)
    if tree is None:
        return []

    results: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                results.append((node.lineno, alias.name))
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                results.append((node.lineno, node.module))
    return results


def _matches_any(module: str, prefixes: tuple[str, ...]) -> bool:
    """True if *module* equals or is a child of any prefix."""
    return any(module == p or module.startswith(f"{p}.") for p in prefixes)


def _relative(filepath: Path) -> str:
    return filepath.relative_to(REPO_ROOT).as_posix()


# ---------------------------------------------------------------------------
# 1. TestKernelIndependence
# ---------------------------------------------------------------------------

class TestKernelIndependence:
    """currency_kernel/** must work without the configuration layer."""

    FORBIDDEN_PREFIXES = ("currency_config", "yaml")

    def test_kernel_files_have_no_forbidden_imports(self):
        violations = [
            f"  {_relative(path)}:{lineno} imports '{module}'"
            for path in _python_files("currency_kernel")
            for lineno, module in _extract_imports(path)
            if _matches_any(module, self.FORBIDDEN_PREFIXES)
        ]
        assert not violations, (
            "Kernel independence violation:\n" + "\n".join(violations)
        )


# ---------------------------------------------------------------------------
# 2. TestDomainPurity
# ---------------------------------------------------------------------------

class TestDomainPurity:
    """Domain code receives its inputs; it never reaches into os.environ."""

    FORBIDDEN_ATTRIBUTES = {"os.environ", "os.getenv"}

    def test_domain_does_not_read_environment(self):
        violations: list[str] = []
        for path in _python_files("currency_kernel/domain"):
            tree = _parse(path)
            if tree is None:
                continue
            for node in ast.walk(tree):
                if isinstance(node, ast.Attribute) and isinstance(node.value, ast.Name):
                    name = f"{node.value.id}.{node.attr}"
                    if name in self.FORBIDDEN_ATTRIBUTES:
                        violations.append(f"  {_relative(path)}:{node.lineno} uses {name}")
        assert not violations, "Domain purity violation:\n" + "\n".join(violations)


# ---------------------------------------------------------------------------
# 3. TestConfigCentralisation
# ---------------------------------------------------------------------------

class TestConfigCentralisation:
    """Callers go through currency_config's public entrypoints."""

    def test_loader_only_imported_by_package_init(self):
        allowed = {"currency_config/__init__.py", "currency_config/loader.py"}
        violations = [
            f"  {_relative(path)}:{lineno} imports '{module}'"
            for root in ("currency_kernel", "currency_config")
            for path in _python_files(root)
            if _relative(path) not in allowed
            for lineno, module in _extract_imports(path)
            if _matches_any(module, ("currency_config.loader",))
        ]
        assert not violations, (
            "Config centralisation violation:\n" + "\n".join(violations)
        )


# ---------------------------------------------------------------------------
# 4. TestCldrConfinement
# ---------------------------------------------------------------------------

class TestCldrConfinement:
    """Locale data enters the kernel through NumberFormatRules only."""

    def test_babel_imported_only_by_number_format(self):
        allowed = "currency_kernel/domain/number_format.py"
        importers = {
            _relative(path)
            for root in ("currency_kernel", "currency_config")
            for path in _python_files(root)
            for _, module in _extract_imports(path)
            if _matches_any(module, ("babel",))
        }
        assert importers == {allowed}
