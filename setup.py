from pathlib import Path
from setuptools import setup, find_packages


def _parse_requirements(path: str) -> list[str]:
    req_path = Path(path)
    if not req_path.exists():
        return []
    lines = req_path.read_text().splitlines()
    return [l.strip() for l in lines if l.strip() and not l.strip().startswith("#")]


setup(
    name="ddg_answers",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["ddg_answers*"]),
    include_package_data=True,
    package_data={"ddg_answers": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=_parse_requirements("requirements-runtime.txt"),
    extras_require={"test": _parse_requirements("requirements-test.txt")},
)
