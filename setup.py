from setuptools import setup, find_packages

setup(
    name="ssm_eb",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "ruamel.yaml>=0.17.0",
        "jsonschema>=3.2.0",
        "boto3>=1.20.0",
        "botocore>=1.23.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ssm-eb=ssm_eb.cli:main",
        ],
    },
    description="Render AWS SSM parameters as Elastic Beanstalk option settings",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
