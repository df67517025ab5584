"""Install user accounts service."""

from setuptools import setup, find_packages

setup(
    name='user-accounts',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.10',
    install_requires=[
        "fastapi",
        "uvicorn",
        "python-multipart",
        "sqlalchemy>=2.0",
        "pydantic>=2.6",
        "bcrypt",
        "email-validator",
        "python-json-logger",
        "python-dotenv",
        "pytz",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ]
    },
    entry_points={
        'console_scripts': [
            'user-accounts=user_accounts.main:run',
        ]
    },
    zip_safe=False
)
