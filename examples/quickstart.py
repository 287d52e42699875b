# %% [markdown]
# # fuzzyratio: Quickstart
#
# **Scoring messy labels** with Ratcliff-Obershelp matching blocks
#
# ---
#
# ## The Problem
#
# Team names, product labels and customer names arrive with different word
# order, punctuation and casing:
#
# ```
# "New York Mets"            vs  "mets, new york"
# "Atlanta Braves"           vs  "atlanta braves (NL East)"
# "hello WORLD"              vs  "hello world"
# ```
#
# | Part | Topic |
# |------|-------|
# | 1 | Scorers: ratio, partial_ratio, token scorers |
# | 2 | Matching blocks |
# | 3 | Batch operations |
# | 4 | Polars |

# %%
import polars as pl

import fuzzyratio as fr

# %% [markdown]
# ---
# ## Part 1: Scorers
#
# `ratio` counts the characters covered by matching blocks: twice the
# matched count over the combined length, on a 0-100 scale.

# %%
print(fr.ratio("hello test", "hello world"))  # 57
print(fr.ratio("hello bar", "hello"))  # 71
print(fr.ratio("hellobar", "hello"))  # 77

# %% [markdown]
# Scoring is case sensitive. `pre_process` lowercases and replaces
# punctuation with spaces.

# %%
print(fr.ratio("hello WORLD", "hello world"))
print(fr.ratio(fr.pre_process("hello WORLD"), fr.pre_process("hello world")))  # 100

# %% [markdown]
# `partial_ratio` scores the shorter string against the best window of the
# longer one, which suits containment.

# %%
print(fr.partial_ratio("hello", "hello world"))  # 100
print(fr.partial_ratio("hello", "hallo world"))  # 80

# %% [markdown]
# Token scorers neutralize word order (`token_sort_ratio`) and duplicated
# or extra words (`token_set_ratio`).

# %%
print(fr.token_sort_ratio("New York Mets", "mets, new york"))  # 100
print(
    fr.partial_token_set_ratio(
        "new york mets vs atlanta braves",
        "new york city mets - atlanta braves",
        False,
        False,
    )
)  # 100

# %% [markdown]
# ---
# ## Part 2: Matching blocks
#
# Every scorer is built on the same block list. The last block is always a
# zero-length sentinel.

# %%
for block in fr.matching_blocks("hello test", "hello world"):
    print(block)

# %% [markdown]
# ---
# ## Part 3: Batch operations

# %%
teams = ["New York Mets", "New York Yankees", "Atlanta Braves", "Chicago Cubs"]

for match in fr.best_matches(teams, "ny mets", limit=2):
    print(f"{match.text}: {match.score}")

result = fr.deduplicate(["New York Mets", "mets new york", "Atlanta Braves"])
print(result.groups)

# %% [markdown]
# ---
# ## Part 4: Polars

# %%
df = pl.DataFrame({"raw": ["mets, new york", "braves", None]})
print(
    df.with_columns(
        team=pl.col("raw").fuzzy.best_match(teams, min_score=60),
        score=pl.col("raw").fuzzy.similarity("new york mets", scorer="token_sort_ratio"),
    )
)

left = pl.DataFrame({"team": ["NY Mets", "Atlanta Braves"]})
right = pl.DataFrame({"club": teams})
print(fr.fuzzy_join(left, right, left_on="team", right_on="club", min_score=60, how="left"))
