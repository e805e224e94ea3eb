"""HTML page for the wallet status view."""

from html import escape

from wallet_watcher.rendering.view import CoinView, WalletView

BASE_STYLES = """
    <style>
        h1 {
            border-bottom: 1px solid #ccc;
            padding-bottom: 0.25em;
        }
        h2 {
            display: flex;
            align-items: center;
            margin-bottom: 0.5em;
        }
        h2 img {
            width: 32px;
            height: 32px;
            margin-right: 0.35em;
        }
        .container {
            width: 800px;
            margin: 0 auto;
        }
        .row {
            margin: 1.5em 0;
        }
    </style>
"""


def render_coin_rows(coin: CoinView) -> str:
    rows = []
    for entry in coin.addresses:
        rows.append(
            f"""
            <div class="row">
                <h2><img src="{escape(coin.icon_url)}" alt="{escape(coin.name)}">{escape(coin.name)}</h2>
                Address: <a href="{escape(entry.link_url)}">{escape(entry.address)}</a><br>
                Balance: {escape(entry.balance)}<br>
                Last Active On: {escape(entry.last_active)}<br>
                Time Since Last Activity: {escape(entry.time_since_last_activity)}
            </div>
            """
        )
    return "".join(rows)


def render_page(view: WalletView) -> str:
    coins_html = "".join(render_coin_rows(coin) for coin in view.coins)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Crypto Wallet Watcher</title>
    {BASE_STYLES}
</head>
<body>
    <div class="container">
        <h1>Wallet Status</h1>
        {coins_html}
    </div>
</body>
</html>
"""
