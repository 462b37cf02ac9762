from glob import glob
from setuptools import setup, find_packages


setup(
    name='shuntingyard',
    version='0.1.0',
    description='Infix calculator: tokenizer, shunting-yard, RPN evaluator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
