import os
from setuptools import setup


def load_requirements(filename):
    path = os.path.join(os.path.dirname(__file__), 'requirements', filename)
    with open(path, 'r') as fp:
        return [line.strip() for line in fp.readlines()
                if line.strip() and not line.startswith('#')]


def load_version():
    path = os.path.join(os.path.dirname(__file__), 'inidoc', 'VERSION')
    with open(path, 'r') as fp:
        return fp.read().strip()


requirements = load_requirements('requirements.txt')
dev_requirements = load_requirements('requirements-dev.txt')
feature_requirements = load_requirements('requirements-features.txt')

with open('README.md', 'r') as fp:
    long_description = fp.read()

setup(
    name='inidoc',
    version=load_version(),
    license='ISC',
    description='INI document model, parser and serializer',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Adam Meily',
    author_email='meily.adam@gmail.com',
    packages=['inidoc', 'inidoc.formats'],
    package_data={'inidoc': ['VERSION']},
    install_requires=requirements,
    extras_require={
        'dev': dev_requirements,
        'features': feature_requirements
    },
    keywords=['ini', 'config', 'configuration'],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: ISC License (ISCL)',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries'
    ]
)
