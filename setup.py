from setuptools import find_packages
from setuptools import setup

from mathb import version


with open('requirements-minimal.txt') as f:
    minimal_reqs = f.read().splitlines()


setup(
    name='mathb-server',
    version=version,
    packages=find_packages(exclude=('test*',)),
    include_package_data=True,
    install_requires=minimal_reqs,
    extras_require={
        'testing': [
            'coverage',
            'pytest',
        ],
    },
    license='BSD License',
    classifiers=(
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ),
    python_requires='>=3.10',
    entry_points={
        'console_scripts': [
            'mathb-create-directories = mathb.run:create_directories_main',
        ],
    },
)
