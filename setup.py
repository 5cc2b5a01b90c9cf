from setuptools import setup, find_packages

setup(
    name="cmdpane",
    version="0.1.0",
    description="Embeddable interactive command line for terminal programs",
    packages=find_packages(include=["cmdpane", "cmdpane.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
