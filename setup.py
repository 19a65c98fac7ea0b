#!/usr/bin/env python
from setuptools import setup, find_packages


def long_desc():
    with open('README.md') as f:
        return f.read()


setup(
    name='cmdtree',
    version='1.0',
    description='Render a command registry as a text or image tree.',
    license='MIT',
    long_description=long_desc(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['test', 'test.*']),
    python_requires='>=3.8',
    install_requires=['markdown2'],
    test_suite='test',
    entry_points={
        'console_scripts': [
            'cmdtree=cmdtree.command:main',
        ]
    },
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: User Interfaces',
    ]
)
