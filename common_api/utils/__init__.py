# SPDX-License-Identifier: Apache-2.0

"""
Request-scoped helpers: endpoint context and URL builders.
"""
