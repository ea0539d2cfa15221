from setuptools import setup, find_packages

setup(
    name="entity_columns",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"entity_columns": ["templates/*.html"]},
    description="Lay out a list of entities as HTML tables with thumbnails, names and links.",
    install_requires=["jinja2", "Pillow"],
    extras_require={"test": ["pytest", "lxml"], "docs": ["sphinx"]},
    entry_points={
        "console_scripts": [
            "entity-columns=entity_columns.scripts.entity_columns:main",
        ],
    },
)
