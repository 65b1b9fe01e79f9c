from glob import glob
from setuptools import setup


setup(
    name='infix',
    use_scm_version={
        # Building outside a git checkout.
        'fallback_version': '0.1.0',
    },
    description='Infix calculator over 64-bit integers',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['infix'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
            'mypy',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
