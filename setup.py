"""
costmap-clearing 安装配置
"""

from setuptools import setup, find_packages
from pathlib import Path

# 读取README
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""


def read_requirements(filename):
    requirements_file = Path(__file__).parent / filename
    if not requirements_file.exists():
        return []
    with open(requirements_file, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip() and not line.startswith('#')]


setup(
    name="costmap-clearing",
    version="1.0.0",
    description="分层代价地图选择性清理服务 - 整体清除、机器人周围窗口清除、保留区域外清除",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Brain Team",
    author_email="",
    packages=find_packages(include=["costmap_clearing", "costmap_clearing.*"]),
    python_requires=">=3.9",
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "test": read_requirements("requirements-dev.txt"),
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
    ],
    keywords="robotics, navigation, costmap, occupancy grid",
    include_package_data=True,
    zip_safe=False,
)
