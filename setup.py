from setuptools import setup, find_packages

setup(
    name="critical-inliner",
    version="1.0.0",
    packages=find_packages(exclude=['critical_inliner.tests']),
    install_requires=[
        'beautifulsoup4>=4.11',
        'soupsieve',
        'cssutils',
        'csscompressor',
        'aiofiles',
        'orjson',
        'chardet',
        'tqdm',
        'colorama',
        'typing-extensions'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'pytest-timeout',
            'pytest-xdist',
        ],
    },
    entry_points={
        'console_scripts': [
            'critical-inliner=critical_inliner.cli:main',
        ],
    },
    python_requires='>=3.8',
    description="Inline the critical CSS of HTML documents and defer loading the rest",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
