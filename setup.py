from setuptools import setup


with open('README.rst', 'r') as f:
    # skip the banners
    lines = f.readlines()[6:]
    long_desc = ''.join(lines)

setup(
    name='pybimatch',
    version='0.1.0',
    description='Maximum-cardinality matchings in bipartite graphs via the Hopcroft-Karp algorithm',
    long_description=long_desc,
    long_description_content_type='text/x-rst',
    license='BSD 2-Clause',
    packages=['pybimatch'],
    install_requires=[
        'numpy>=1.17',
        'scipy>=1.4.0',
    ],
    extras_require={
        'test': ['scipy>=1.4.0'],
        'experiments': ['matplotlib'],
    },
    python_requires='>=3.9'
)
