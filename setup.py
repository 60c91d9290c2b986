from setuptools import setup, find_packages


setup(
    version="0.1.0",
    name="imagefetch",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "attrs>=17.4.0",
        "aiohttp>=3.5.4",
        "yarl>=1.6.0",
        # Image.open(formats=...) needs Pillow 7.1
        "Pillow>=7.1.0",
    ],
    extras_require={
        "httpx": ["httpx>=0.23.0"],
        "test": ["pytest", "pytest-asyncio>=0.17", "httpx>=0.23.0"],
    },
)
