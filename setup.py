from setuptools import setup, find_packages

setup(
    name='graph-rest-client',
    version='0.1.0',
    author='Graph REST Client Developers',
    description='Client for REST-style graph APIs with cursor pagination',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(include=["graphrest", "graphrest.*"]),
    include_package_data=True,

    license='Apache License 2.0',
    install_requires=[
        "httpx>=0.24",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "python-dotenv",
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
