# ddpar

This package computes par scores and par contracts for contract bridge. It
works from a double dummy table, which gives the number of tricks each
player can take as declarer in each strain.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```python
from ddpar.ddtable import DDTable
from ddpar.par import par, sides_par_bin
from ddpar.dealer_par import dealer_par

# Strains are listed in the order spades, hearts, diamonds, clubs, notrump.
# Within each strain the order is North, East, South, West.
table = DDTable.from_flat([
    5, 8, 5, 8,  6, 6, 6, 6,  5, 7, 5, 7,  7, 5, 7, 5,  6, 6, 6, 6,
])

result = par(table, vulnerable=0)       # 0 none, 1 both, 2 NS, 3 EW
print(result.score)                     # ('NS -110', 'EW 110')
print(result.contracts)                 # ('NS:EW 2S', 'EW:EW 2S')

ns, ew = sides_par_bin(table, vulnerable=0)   # structured ParContract lists

dealer = dealer_par(table, dealer=0, vulnerable=0)   # dealer 0 = North
print(dealer.score, dealer.contracts)   # -110 ('2S-EW',)
```

### Modules

- `ddpar.ddtable`: `DDTable` holds a table of tricks by strain and declarer.
  Use `DDTable.from_flat` to build one from 20 values. `tricks` returns one
  entry and `row` returns one strain.
- `ddpar.par`: `par` returns the par result for each side as text.
  `sides_par_bin` returns the same result as `SideParResult` and
  `ParContract` values. The module also provides the helpers `raw_score` and
  `multi_contracts`.
- `ddpar.dealer_par`: `dealer_par` computes par when the given dealer opens
  the bidding. It returns a `DealerParResult`, and a passed-out deal gives
  score 0 and `"pass"`.
- `ddpar.tables`: seat arithmetic (`hand_id`, `lho`, `rho`, `partner`) and
  lookups on a 13-bit suit holding (`highest_rank`, `lowest_rank`,
  `count_bits`, `rel_rank`, `win_ranks`, `move_group`). It also defines the
  enums `Hand` and `Strain`.
- `ddpar.abstats`: `ABStats` counts search-node terminations by reason
  (`ABCount`) and by depth. `format_stats` renders the counts as text tables.
- `ddpar.lazyfile`: `LazyFile` is an output file that is opened only when
  `stream()` is first called.

If a table, dealer or vulnerability is out of range, these functions raise
`ValueError`.

## What this package does not do

This package does not solve deals double dummy. It cannot produce the trick
table from the cards, so you must supply the table. It has no PBN parser and
no command-line program.