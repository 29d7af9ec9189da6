#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.12"
# ///
"""
Build script for dockstrap - concatenates src/ modules into a single executable script.

The result can be fetched and run directly:
    curl -fsSL <release-url>/dockstrap -o dockstrap && chmod +x dockstrap && ./dockstrap

Usage: ./build.py
"""

from pathlib import Path

# Header for the generated script (shebang + uv metadata)
HEADER = '''#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.12"
# dependencies = ["textual>=0.89.0"]
# ///
"""
dockstrap - Install Docker Engine and Docker Compose with the native package manager.

Usage: dockstrap [--plan | --dry-run | --stop-on-error | --tui]
"""
'''

# Order matters - modules must be concatenated in dependency order.
# Package __init__.py files only re-export and are skipped.
MODULE_ORDER = [
    "errors.py",             # No dependencies
    "model/host.py",
    "model/step.py",
    "model/outcome.py",      # Depends on host, step
    "config.py",
    "command_execution.py",  # Depends on model
    "commandoutput.py",      # Depends on command_execution
    "privilege.py",          # Depends on errors, model
    "distro/base.py",
    "distro/detector.py",    # Depends on command_execution, errors
    "distro/debian.py",      # Depends on config, detector (registration)
    "distro/fedora.py",
    "distro/arch.py",
    "distro/alpine.py",
    "initsys.py",
    "postinstall.py",
    "verify.py",
    "installer.py",          # Depends on distro, initsys, postinstall
    "ui/ids.py",
    "ui/widgets.py",
    "app.py",                # Depends on ui, inlines ui/styles.css
    "cli.py",                # Depends on everything
]

# Local modules and packages (imports to filter out)
LOCAL_MODULES = {
    "app",
    "cli",
    "command_execution",
    "commandoutput",
    "config",
    "distro",
    "errors",
    "initsys",
    "installer",
    "model",
    "postinstall",
    "privilege",
    "ui",
    "verify",
}


def is_local_import(line: str) -> bool:
    """Check if an import statement refers to a module in src/."""
    parts = line.strip().split()
    if len(parts) < 2 or parts[0] not in ("from", "import"):
        return False
    return parts[1].split(".")[0] in LOCAL_MODULES


def extract_imports(content: str) -> tuple[set[str], str]:
    """Extract module-level import statements and return (imports, remaining code).

    Local imports are dropped wherever they appear: once concatenated, every
    local name is already defined at module level. Imports nested under
    `if TYPE_CHECKING:` are replaced by `pass` so the block stays valid.
    """
    imports = set()
    lines = content.split('\n')
    non_import_lines = []
    in_imports = True
    in_multiline_import = False
    current_import = []

    i = 0
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        # Handle multi-line imports
        if in_multiline_import:
            current_import.append(line)
            if ')' in line:
                # End of multi-line import
                full_import = '\n'.join(current_import)
                if not is_local_import(current_import[0]):
                    imports.add(full_import)
                current_import = []
                in_multiline_import = False
            i += 1
            continue

        # Skip empty lines and comments at the start
        if in_imports and (not stripped or stripped.startswith('#')):
            if stripped.startswith('#') and not stripped.startswith('# ///'):
                non_import_lines.append(line)
            i += 1
            continue

        # Only extract module-level imports (no indentation)
        if line and not line[0].isspace() and (stripped.startswith('from ') or stripped.startswith('import ')):
            # Check if it's a multi-line import
            if '(' in line and ')' not in line:
                in_multiline_import = True
                current_import = [line]
                i += 1
                continue

            if not is_local_import(line):
                imports.add(line)
        elif line and line[0].isspace() and is_local_import(line):
            # Nested local import (TYPE_CHECKING block)
            indent = line[: len(line) - len(line.lstrip())]
            non_import_lines.append(f"{indent}pass")
        else:
            in_imports = False
            non_import_lines.append(line)

        i += 1

    return imports, '\n'.join(non_import_lines)


def normalize_import(imp: str) -> tuple[str, set[str]]:
    """Normalize an import statement and extract module and names.

    Returns (module, {names}) or (full_import, set()) for simple imports.
    """
    imp = imp.strip()

    # Handle 'from X import Y, Z' or 'from X import (Y, Z)'
    if imp.startswith('from '):
        # Remove 'from ' prefix
        rest = imp[5:]
        if ' import ' in rest:
            module, names_part = rest.split(' import ', 1)
            # Drop trailing comments, then clean up the names
            names_part = '\n'.join(part.split('#')[0] for part in names_part.split('\n'))
            names_part = names_part.strip().strip('()')
            # Handle multi-line by joining and splitting
            names_part = ' '.join(names_part.split())
            names = {n.strip().rstrip(',') for n in names_part.replace('\n', ',').split(',') if n.strip()}
            return f'from {module} import', names

    # Simple import
    return imp, set()


def merge_imports(imports: set[str]) -> list[str]:
    """Merge imports from the same module."""
    # Group by module
    module_names: dict[str, set[str]] = {}
    simple_imports = []

    for imp in imports:
        module_prefix, names = normalize_import(imp)
        if names:
            if module_prefix not in module_names:
                module_names[module_prefix] = set()
            module_names[module_prefix].update(names)
        else:
            simple_imports.append(module_prefix)

    # Reconstruct imports
    result = []
    for module_prefix, names in sorted(module_names.items()):
        sorted_names = sorted(names)
        if len(sorted_names) <= 3:
            result.append(f'{module_prefix} {", ".join(sorted_names)}')
        else:
            # Multi-line format
            names_str = ',\n    '.join(sorted_names)
            result.append(f'{module_prefix} (\n    {names_str},\n)')

    result.extend(sorted(set(simple_imports)))
    return result


def sort_imports(imports: set[str]) -> str:
    """Sort and deduplicate imports: standard library, then third-party."""
    # First merge imports
    merged = merge_imports(imports)

    stdlib = []
    thirdparty = []
    future = []

    for imp in merged:
        if imp.startswith('from __future__'):
            future.append(imp)
        elif 'textual' in imp:
            thirdparty.append(imp)
        else:
            stdlib.append(imp)

    result = []
    if future:
        result.extend(sorted(future))
        result.append('')
    if stdlib:
        result.extend(sorted(stdlib))
        result.append('')
    if thirdparty:
        result.extend(sorted(thirdparty))
        result.append('')

    return '\n'.join(result)


def process_app_module(content: str, css_content: str) -> str:
    """Process app.py to inline the CSS."""
    # Replace the CSS file loading with inlined CSS
    lines = content.split('\n')
    result = []

    for line in lines:
        # Replace the CSS file loading line
        if '"styles.css"' in line and line.startswith('APP_CSS'):
            result.append(f'APP_CSS = """{css_content}"""')
            continue

        result.append(line)

    return '\n'.join(result)


def build():
    """Build the single-file dockstrap script from src/ modules."""
    src_dir = Path(__file__).parent / "src"
    output_path = Path(__file__).parent / "dockstrap"

    if not src_dir.exists():
        print(f"Error: {src_dir} does not exist")
        return False

    # Load CSS file
    css_path = src_dir / "ui" / "styles.css"
    if not css_path.exists():
        print(f"Error: {css_path} does not exist")
        return False
    css_content = css_path.read_text()

    all_imports = set()
    all_code = []

    for module_name in MODULE_ORDER:
        module_path = src_dir / module_name
        if not module_path.exists():
            print(f"Warning: {module_path} does not exist, skipping")
            continue

        content = module_path.read_text()

        # Special handling for app.py - inline CSS
        if module_name == "app.py":
            content = process_app_module(content, css_content)

        imports, code = extract_imports(content)
        all_imports.update(imports)

        # Add module separator comment
        all_code.append(f"\n# === {module_name} ===\n")
        all_code.append(code.strip())

    # Combine everything
    output = HEADER
    output += sort_imports(all_imports)
    output += '\n'.join(all_code)
    output += '\n'

    # Write output
    output_path.write_text(output)
    output_path.chmod(0o755)

    print(f"Built {output_path} ({len(output.splitlines())} lines)")
    return True


if __name__ == "__main__":
    build()
