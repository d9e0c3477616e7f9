from setuptools import setup, find_packages

setup(
    name='vintagehider',
    version='1.0.0',
    description='Unpublish sold out vintage products from a Shopify store catalog',
    author='Your Name',
    author_email='your.email@example.com',
    packages=find_packages(include=['vintagehider', 'vintagehider.*']),
    include_package_data=True,
    install_requires=[
        'requests',
        'python-dotenv',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'vintagehider=vintagehider.__main__:main',
        ],
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
