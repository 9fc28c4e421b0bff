# Copyright 2020 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
#     http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
from setuptools import find_namespace_packages, setup

with open("VERSION", "r") as version_file:
    version = version_file.read().strip()

setup(
    name="waitloop",
    description="Bounded, adaptive polling loop that waits for a condition while doing useful busy work",
    version=version,
    python_requires=">=3.7",
    packages=find_namespace_packages("src"),
    package_dir={"": "src"},
    author="Amazon Web Services",
    license="Apache License 2.0",
    keywords="wait poll condition timeout backoff",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    setup_requires=["setuptools", "wheel"],
    install_requires=["psutil"],
    extras_require={"test": ["pytest"]},
)
