import os

from setuptools import find_packages, setup


here = os.path.abspath(os.path.dirname(__file__))

about = {}
with open(os.path.join(here, "weblinks", "__version__.py")) as f:
    exec(f.read(), about)


def read(filename):
    with open(os.path.join(here, filename), 'rb') as f:
        return f.read().decode('utf-8')


setup(
    name='weblinks',
    version=about['__version__'],
    description='Parse HTTP Link header values (RFC 8288) into links keyed by relation type.',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    entry_points='''
        [console_scripts]
        weblinks=weblinks.command_line:main
    ''',
    install_requires=[
        'colorama',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=find_packages(exclude=['weblinks.test', 'weblinks.test.*']),
    license='MIT',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
    ]
)
