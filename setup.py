from setuptools import setup

def find_version():
    import os
    with open(os.path.join("region_tree", "__init__.py")) as file:
        for line in file:
            if line.startswith("__version__"):
                start = line.index('"')
                end = line[start+1:].index('"')
                return line[start+1:][:end]

long_description = ""

setup(
    name = 'region-tree',
    packages = ['region_tree', 'region_tree.tk'],
    version = find_version(),
    install_requires = ['Pillow'],
    extras_require = {'test': ['pytest']},
    python_requires = '>=3.7',
    description = 'Selectable tree of regions with tri-state check boxes and per level layouts',
    long_description = long_description,
    keywords = ['tkinter', 'tree', 'checkbox', 'region'],
    classifiers = [
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development :: User Interfaces"
    ]
)
