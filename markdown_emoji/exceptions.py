# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0


class AssetError(Exception):
    pass


class AssetNotFound(AssetError):
    def __init__(self, name):
        super().__init__(f"Asset {name} not found")
        self.name = name


class AssetFetchError(AssetError):
    def __init__(self, status, url):
        super().__init__()
        self.status = status
        self.url = url

    def __str__(self):
        return f"Asset fetch error {self.status}"

    def display(self):
        return f"Asset fetch error {self.status} : {self.url}"
