from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    # FletXr is published as pre-releases; if pip cannot resolve it run:
    # uv pip install FletXr --pre
    "flet>=0.28.0",
    "FletXr>=0.1.4",

    # --- DATABASE ---
    "duckdb>=0.10.0",
    "pydantic>=2.0.0",

    # --- CONFIG ---
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",

    # --- TESTS---
    "pytest-asyncio>=0.23.0",
    "pytest",
]

setup(
    name="AuthFlow",
    version="0.1.0",
    description="AuthFlow | debounced login form and persisted session demo",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"authflow.shared.config": ["settings/*.yaml"]},
    include_package_data=True,
    install_requires=install_requires,
    entry_points={
        "gui_scripts": [
            "authflow=authflow.app.main:run",
        ],
    },
    python_requires=">=3.11",
)
