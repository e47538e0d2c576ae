# %% [markdown]
# # fuzzymetrics: Quickstart
#
# A tour of the metrics, the building blocks they are made of, and the
# batch and Polars helpers on top.
#
# | Part | Topic |
# |------|-------|
# | 1 | Scoring a pair by metric name |
# | 2 | Configured metric instances |
# | 3 | Tokenizers and cost functions |
# | 4 | Lists: best match, fuzzy containment |
# | 5 | Polars |
# | 6 | Choosing a metric by estimated cost |

# %%
import polars as pl

import fuzzymetrics as fm
from fuzzymetrics.costs import AffineGap, BipolarCost
from fuzzymetrics.tokenizers import QGram2Tokenizer, StopTermFilter, WhitespaceTokenizer

# %% [markdown]
# ## Part 1: Scoring a pair by metric name
#
# `similarity` is always in `[0, 1]`; `unnormalized_similarity` is the raw
# algorithm output, which for Levenshtein is the edit distance.

# %%
print(fm.similarity("kitten", "sitting"))
print(fm.unnormalized_similarity("kitten", "sitting"))
print(fm.similarity("MARTHA", "MARHTA", metric=fm.Metric.JARO_WINKLER, as_percentage=True))
print(fm.similarity("Hello", "HELLO", manipulator=str.title))

# %%
for metric in fm.Metric:
    print(f"{metric.value:40s} {fm.similarity('jon smith', 'john smyth', metric=metric):.3f}")

# %% [markdown]
# ## Part 2: Configured metric instances
#
# Every metric is a class. Instances are immutable and can be shared
# between threads.

# %%
jw = fm.JaroWinkler(prefix_scale=0.2)
print(jw, jw.similarity("prefix_test", "prefix_best"))

me = fm.MongeElkan(inner=fm.Levenshtein())
print(me.similarity("jon smith", "john smith"))
print(me.similarity("john smith", "jon"))  # Not symmetric

# %% [markdown]
# ## Part 3: Tokenizers and cost functions

# %%
print(WhitespaceTokenizer().tokenize("the cat sat"))
print(QGram2Tokenizer().tokenize("night"))

no_articles = WhitespaceTokenizer(StopTermFilter(["the", "a"]))
print(fm.JaccardSimilarity(no_articles).similarity("the cat", "a cat"))

sw = fm.SmithWatermanGotoh(gap=AffineGap(open_cost=2.0, extend_cost=0.5), cost=BipolarCost())
print(sw.similarity("abcxxdef", "abcdef"))

# %% [markdown]
# ## Part 4: Lists

# %%
movies = ["The Godfather", "Pulp Fiction", "Fight Club", "Inception"]
print(fm.best_match("pulp ficton", movies, metric="jaro_winkler", manipulator=str.lower))
print(fm.similarities("fight clb", movies, as_percentage=True))
print(fm.contains_fuzzy("Order #1234 for Jon Smith", "john"))
print(fm.filter_fuzzy(["red apple", "green pear", "aple pie"], "apple"))
print(fm.similarity_matrix(["hello", "world"], ["hallo", "word"]))

# %% [markdown]
# ## Part 5: Polars

# %%
df = pl.DataFrame({"name": ["John", "Jon", "Jane", None]})
print(
    df.with_columns(
        score=pl.col("name").fuzzy.similarity("John"),
        similar=pl.col("name").fuzzy.is_similar("John", min_similarity=0.75),
        match=pl.col("name").fuzzy.best_match(["John", "Jane"], metric="jaro_winkler"),
    )
)

categories = ["Electronics", "Clothing", "Food", "Home"]
raw = pl.Series(["electronic", "clothes", "fod"])
print(fm.batch_best_match(raw, categories, manipulator=str.lower))
print(fm.match_series(pl.Series(["apple", "banana"]), pl.Series(["appel", "banan", "cherry"]), min_similarity=0.6))

# %% [markdown]
# ## Part 6: Choosing a metric by estimated cost
#
# `estimated_cost` predicts the running time in milliseconds before a
# comparison is made; `measure_cost` times one real run.

# %%
a, b = "the quick brown fox", "the quick brown dog"
for metric in sorted(fm.Metric, key=lambda m: fm.create_metric(m).estimated_cost(a, b)):
    scorer = fm.create_metric(metric)
    print(f"{metric.value:40s} {scorer.estimated_cost(a, b):.5f}ms")
