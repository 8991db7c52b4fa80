# -*- coding: utf-8 -*-
from setuptools import setup

package_dir = \
{'': 'python'}

packages = \
['jsonrfc',
 'jsonrfc.client',
 'jsonrfc.client.commands',
 'jsonrfc.utils']

install_requires = \
['pyyaml', 'typing-extensions']

extras_require = \
{'test': ['pytest']}

entry_points = \
{'console_scripts': ['jsonrfc = jsonrfc.client.main:main']}

setup_kwargs = {
    'name': 'jsonrfc',
    'version': '0.3.1',
    'description': 'Implementations of JSON RFC 6901 and 6902, Pointers and Patch respectively',
    'long_description': "# jsonrfc\n\nPointer allows evaluating and transforming a JSON document at a given keypath.\nPatch encodes operations that abstract pointer transformations.\n\nDocuments are never modified in place: every operation returns a new document\nsharing all untouched subtrees with the original one.\n\n```python\nfrom jsonrfc import add, evaluate, fetch\n\ndoc = {\"foo\": 5, \"bar\": [1, 2, 3]}\nassert fetch(doc, \"/bar/1\").unwrap() == 2\nassert evaluate(doc, add(\"/bar/1\", \"x\")).unwrap() == {\"foo\": 5, \"bar\": [1, \"x\", 2, 3]}\n```\n\nThe `jsonrfc` command-line utility applies the same operations to JSON or YAML files.\n",
    'long_description_content_type': 'text/markdown',
    'license': 'MIT',
    'package_dir': package_dir,
    'packages': packages,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'entry_points': entry_points,
    'python_requires': '>=3.8,<4.0',
}


setup(**setup_kwargs)


# This setup.py was autogenerated using Poetry for backward compatibility with setuptools.
