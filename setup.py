from setuptools import find_packages, setup

setup(
    name="pagersduty",
    version="0.1.0",
    license="Apache License 2.0",

    python_requires=">=3.11",
    description="Client library for the PagerDuty REST v2 and Events APIs "
                "with typed resource envelopes and event outcomes.",

    packages=find_packages(exclude=("tests", "tests.*")),

    install_requires=[
        "Click>=8.0,<9.0",
        "httpx>=0.27,<1.0",
        "prometheus-client>=0.20,<1.0",
        "pydantic>=2.11,<3.0",
        "pydantic-settings>=2.3,<3.0",
        "python-json-logger>=3.1",
        "structlog>=24.1",
    ],

    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-mock>=3.14",
        ],
    },

    test_suite="tests",

    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.12',
    ],
    entry_points={
        'console_scripts': [
            'pagersduty = pagersduty.cli:root',
        ],
    },
)
