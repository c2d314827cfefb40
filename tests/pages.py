from scrapy.http import HtmlResponse

OFFER_PAGE = """
<html><body>
<div class="offer-list__content">
  <div data-a-target="offer-list-FGWP_FULL">
    <div class="item-card">
      <div class="item-card__action">
        <a href="/cities-skylines/dp/amzn1.pg.item.1">
          <div data-a-target="card-image"><img src="https://images.example/cities.jpg"></div>
          <div class="item-card-details__body">
            <div class="item-card-details__body__primary"><h3>Cities: Skylines</h3></div>
          </div>
          <div class="availability-date"><span>Ends</span><span>Jan 5, 2026</span></div>
        </a>
      </div>
    </div>
  </div>
  <div data-a-target="offer-list-IN_GAME_LOOT">
    <div class="item-card">
      <div class="item-card__action">
        <a href="/loot/apex-bonus">
          <div class="item-card-details__body">
            <div class="item-card-details__body__primary"><h3>Bonus Pack</h3></div>
            <p>Apex Legends</p>
          </div>
        </a>
      </div>
    </div>
  </div>
</div>
</body></html>
"""

EMPTY_PAGE = "<html><body><div class='offer-list__content'></div></body></html>"


def make_response(html, url='https://gaming.amazon.com/home'):
    return HtmlResponse(url=url, body=html.encode('utf-8'), encoding='utf-8')
