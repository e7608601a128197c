from setuptools import setup, find_packages


setup(
    name='param-mixin',
    packages=find_packages(exclude=['test', 'test.*']),
    version='0.0.1',
    author='onefinestay',
    author_email='engineering@onefinestay.com',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Topic :: Software Development",
        "Topic :: Utilities",
    ],
    description='Give any class a familiar "param" method',
    include_package_data=True,
    zip_safe=False,
)
