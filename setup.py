import os
from setuptools import find_packages, setup


PKG_NAME = 'bpnn'

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_MICRO = 0
VERSION = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_MICRO}"


def write_version():
    with open(os.path.join(PKG_NAME, '_version.py'), 'w') as f:
        f.write(f'version = "{VERSION}"')


if __name__ == '__main__':
    write_version()

    setup(
        classifiers=[
            'Development Status :: 3 - Alpha',
            'Intended Audience :: Science/Research',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: MIT License',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering',
            'Topic :: Scientific/Engineering :: Artificial Intelligence',
            'Topic :: Scientific/Engineering :: Image Recognition',
            'Operating System :: OS Independent',
        ],
        description=('Two layer feedforward neural network trained with '
                     'online backpropagation'),
        entry_points={
            'console_scripts': [
                f'bpnn-mnist = {PKG_NAME}.cli:main',
            ],
        },
        extras_require={
            'test': ['pytest'],
        },
        install_requires=[
            'numpy',
            'scipy',
        ],
        license='MIT',
        name=PKG_NAME,
        packages=find_packages(exclude=['*.test']),
        python_requires='>=3.6',
        version=VERSION,
    )
