import os.path

import setuptools

root_dir = os.path.abspath(os.path.dirname(__file__))
readme_file = os.path.join(root_dir, 'README.rst')
with open(readme_file, encoding='utf-8') as f:
    long_description = f.read()

install_requires = [
    'attrs>=19.2.0',
]

setuptools.setup(
    name='runlist',
    version='0.1.0',
    description='Sets of an ordered domain stored as sorted, disjoint runs',
    long_description=long_description,
    license='BSD',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    packages=['runlist'],
    python_requires='>=3.7',
    setup_requires=[],
    install_requires=install_requires,
)
