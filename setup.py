from setuptools import setup, find_packages

setup(
    name="hostfetch",
    version="0.1.0",
    packages=find_packages(include=["hostfetch", "hostfetch.*"]),
    description="Terminal system-information summarizer with per-fact caching.",
    install_requires=[
        "psutil",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "hostfetch=hostfetch.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
