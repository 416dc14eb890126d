from setuptools import setup, find_packages

setup(
    name="aqt-score",
    version="1.0.0",
    description="Bullet hole detection and zone scoring for paper shooting targets",
    author="AQT Score",
    packages=find_packages(include=["aqtscore", "aqtscore.*"]),
    install_requires=[
        "opencv-python>=4.8.0",
        "numpy>=1.24.0",
        "scipy>=1.10.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
)
