from setuptools import setup, find_packages

# Setup configuration
setup(
    name="ledmovie",
    version="0.1.0",
    description="LED colour model, movie encoding and comet animation generator",
    author="LED Movie Team",
    packages=find_packages(exclude=['test', 'test.*']),
    include_package_data=True,
    install_requires=[
        'flask',
        'flask-cors',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'ledmovie=ledmovie.cli:main',
        ],
    },
    python_requires='>=3.8',
)
