from setuptools import setup, find_packages

setup(
    name='synwell',
    version='1.0.0',
    description='synwell is a Python package that builds synthetic well models, runs log simulations through the scripting model of a well-log simulation application and post-processes the simulated logs',
    packages=find_packages(include=['synwell', 'synwell.*']),
    install_requires=['numpy', 'scipy', 'matplotlib'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
    license='MIT License'
)
