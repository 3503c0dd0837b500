from setuptools import setup
import codecs
import io
import os.path
import re


with io.open('README.md', encoding='utf-8') as f:
    long_description = f.read()


with io.open('requirements.txt', encoding='utf-8') as f:
    requirements = [r for r in f.read().split('\n') if len(r)]


def read(rel_path):
    here = os.path.abspath(os.path.dirname(__file__))
    with codecs.open(os.path.join(here, rel_path), 'r') as fp:
        return fp.read()


def get_version(rel_path):
    m = re.search(r'^__version__ = "([^"]+)"', read(rel_path), re.M)
    if m is None:
        raise RuntimeError("Unable to find version string.")
    return m.group(1)


setup(name='pyln-bolt11',
      version=get_version('pyln/bolt11/__init__.py'),
      description='Pure python codec for the tagged fields of BOLT #11 payment requests',
      long_description=long_description,
      long_description_content_type='text/markdown',
      url='http://github.com/ElementsProject/lightning',
      author='Christian Decker',
      author_email='decker.christian@gmail.com',
      license='MIT',
      packages=['pyln.bolt11'],
      scripts=[],
      zip_safe=True,
      python_requires='>=3.7',
      extras_require={'test': ['pytest']},
      install_requires=requirements)
