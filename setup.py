from setuptools import setup

setup(
    name="Wordbook",
    version="0.1",
    packages=["wordbook", "wordbook.dictionary"],
    license="",
    author="Sergey Vartanov",
    author_email="me@enzet.ru",
    description="In-memory word and definition lookup",
    python_requires=">=3.11",
    entry_points={
        "console_scripts": ["wordbook=wordbook.__main__:main"],
    },
    install_requires=[
        "coloredlogs",
        "iso639-lang~=2.2",
        "pydantic~=2.0",
        "readchar",
        "rich",
        "typing-extensions>=4.4",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
