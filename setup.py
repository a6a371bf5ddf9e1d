from setuptools import setup

setup(
    name="ultra-tictactoe-search",
    version="0.1.0",
    description="Ultimate tic-tac-toe minimax search with a persistent transposition table",
    python_requires=">=3.8",
    packages=["game", "ai", "ai.search", "ai.baselines", "storage", "utils"],
    py_modules=["config", "selfplay"],
    install_requires=[
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "utt-selfplay=selfplay:main",
        ],
    },
)
