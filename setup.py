from setuptools import setup, find_packages

# Keep in step with folds.__version__
VERSION = "0.1.0"

with open('README.md', 'r', encoding='utf-8') as f:
    readme = f.read()

setup(
    name='folds',
    version=VERSION,
    packages=find_packages(exclude=('tests*',)),

    description='Left and right folds, and the list functions built on them',
    long_description=readme,
    long_description_content_type='text/markdown',
    license='MIT',
    keywords='fold foldr foldl reduce functional cons list',
    python_requires='>=3.10',
    extras_require={
        'dev': [
            'pytest',
            'flake8',
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Development Status :: 3 - Alpha",
    ],
)
