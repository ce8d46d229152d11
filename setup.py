from setuptools import setup, find_packages

setup(
    name = "hubpower",
    version = "0.1",
    description = "USB hub port power switching with libusb-1",
    license = "GPLv3+",
    classifiers = [
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    packages = find_packages(exclude = ["tests"]),
    install_requires = ["libusb1"],
    extras_require = {
        "test": ["pytest"],
    },
    entry_points = {
        "console_scripts": [
            "hub-power = hubpower.tool.power:main",
            "hub-list = hubpower.tool.list:main",
        ],
    },
)
