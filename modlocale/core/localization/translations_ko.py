"""Korean translations for the radial menu mod."""

TRANSLATIONS_KO = {
    # Settings screen
    "Settings_Title": "원형 메뉴 설정",
    # Config option descriptions
    "Config_FoodBindSectors": "음식 자동 바인딩 구역 번호",
    "Config_ignoreDurabilityValue": "내구도 이하인 구급상자 자동 제외 기준",
    "Config_showLowValueFood": "가방에서 저가 아이템을 찾을 때 음식도 포함할지",
    "Config_quickUseLastItemQ": "Q 단축키로 최근 사용 아이템 빠른 사용 활성화",
    "Config_iconSize": "아이콘 크기",
    "Config_iconDistanceFactor": "아이콘의 중심 거리 비율",
    "Config_uiScalePercent": "배경 UI 축소·확대 비율(%)",
    "Config_innerDeadZoneCoefficient": "내부 데드존 계수",
    "Config_outerDeadZoneCoefficient": "외부 데드존 계수",
    "Config_longPressQWaitDuration": "Q를 길게 눌러 메뉴를 여는 시간(지연)",
    "Config_UI8style": "8분할 UI 스타일",
    "Config_UI6style": "6분할 UI 스타일",
    "Config_sectorCount": "구역(섹터) 수",
    "Config_isBulletTimeEnabled": "블릿타임(슬로우모션) 사용",
    "Config_bulletTimeMultiplier": "블릿타임 속도 배율",
    "Config_radialMenuActivationKey": "원형 메뉴 호출 단축키",
    "Config_enableFirstPersonAdaptation": "1인칭 모드 적응 활성화",
    "Config_firstPersonSensitivity": "1인칭에서 메뉴 감도",
    "Config_enableThirdPersonAdaptation": "3인칭 모드 적응 활성화",
    "Config_thirdPersonSensitivityMultiplier": "3인칭에서 메뉴 감도 배율",
    "Config_lockRadialMenuToCenter": "메뉴를 화면 중앙에서만 열기",
    "Config_hintOptionsOnly": "아래 옵션은 설명용이며 실제 기능을 수행하지 않습니다",
    "Config_radialMenuStuckHint": "메뉴가 화면에 멈춰 닫히지 않나요? 'Win' 키를 눌러보세요!",
    "Config_haveFunHint": "즐겜하세요!",
    "Config_rightClickCloseRadialMenuHint": "메뉴 호출 후 마우스 우클릭으로 빠르게 닫을 수 있습니다",
    "Config_disableSpeechBubbles": "오리 머리 위 말풍선 비활성화",
    "Config_playerHatedTypeIDs": "블랙리스트 음식ID(추천 목록의 맨 끝에 배치됩니다)",
    # UI hints
    "UI_ItemCount": "남은 수량: {0}",
    "UI_BindingNotAllowed": "이 항목은 바인딩할 수 없습니다",
    "UI_InstallModConfig": "창작마당(워크숍)에서 필요한 의존 모드를 설치하세요",
    "UI_DefaultStyle": "기본",
    "UI_StyleOption": "{0} 스타일",
    "UI_NoStyleDetected": "{0} 구역용 배경 스타일을 찾지 못해 기본값을 사용합니다",
    # Log messages
    "Log_RadialMenuInit": "원형 메뉴 초기화 시작...",
    "Log_RadialMenuComplete": "원형 메뉴 초기화 완료",
    "Log_BindingComplete": "바인딩이 영구 저장되었습니다: 구역={0}, TypeID={1}, DisplayName={2}, autoBound={3}",
    "Log_IconDistanceUpdated": "아이콘 거리 계수 {0}로 업데이트됨 — 아이콘 위치 재계산 완료",
    "Log_StyleUnavailable": "현재 스타일 {0}은(는) {1} 구역에서 사용할 수 없습니다. 기본 스타일 {2}을(를) 사용합니다",
    "Log_LoadingStyle": "{0} 구역 배경 로드 중 — 스타일: {1}",
    "Log_SectorAngle": "{0}개의 구역 아이콘 배치 계산 완료. 각 구역 각도: {1}°",
    # Item use feedback
    "Use_ExplosionArt": "폭발은 예술이다!",
    "Use_EatItem": "{0}을(를) 먹는다!",
    "Use_EquipItem": "{0} 장착!",
    "Use_UseItem": "{0} 사용!",
    "Use_HealthRecovered": "체력 회복 완료!",
    "Use_Ouch": "아야! 빨리 치료해야 해!",
    "Use_ReplaceAfterUse": "한 번 쓰면 새 것으로 교체됩니다",
    "Use_HealthRemaining": "남은 회복량: {0}",
    "Use_DrinkItem": "{0}을(를) 마신다!",
    "Use_ColaOverflow": "치익! 콜라가 넘쳤다!",
    "Use_ColaDrinking": "꿀꺽꿀꺽꿀꺽……",
    "Use_TasteItem": "{0}을(를) 살짝 맛본다~",
    "Use_ColaByeBye": "콜라 한 모금에 근심 안녕!",
    "Use_Cheers": "건배!",
    "Use_DrinkFirst": "먼저 건배하고 마시자!",
    "Use_DrinkForgetWorries": "이 한 잔이면 걱정 다 잊는다~",
    "Use_FoodTasty": "{0} 진짜 맛있다!",
    "Use_SoFragrant": "와—향이 끝내주네!",
    "Use_HealthFull": "체력이 이미 가득합니다",
    "Use_StrongDrink": "와, 독하다!",
    "Use_DrinkTasty": "정말 맛있다!",
    "Use_DrinkSecretly": "{0}을(를) 몰래 한 모금~",
    "Use_FoodCannotUse": "음식 {0}은(는) 현재 사용할 수 없습니다",
    "Log_FoodEaten": "음식을 섭취했습니다: {0}",
    "Use_DuckRefusesPoop": "오리가 거부합니다! 이건 음식이 아니에요!",
    "Use_DontEatDuckPoop": "오리한테 똥 먹이지 마세요!",
    "Use_PoopDetected": "의심스러운 물체 감지: 고위험 생물 폐기물!",
    "Use_PoopGourmet": "오리는 미식가가 아닙니다—그런 취향은 사양합니다!",
    "Use_DuckCry": "오리가 슬프게 울었습니다: '내가 뭘 잘못했지?'",
    "Use_DuckQuestionLife": "오리가 인생을 되돌아보기 시작했습니다……그리고 당신도요.",
    "Use_DuckReputation": "오리의 평판이 99점 하락했습니다!",
    "Use_DuckGag": "으윽—오리가 토할 것 같아요!",
    "Use_DuckCivilRights": "오리가 기본 식사권을 요구합니다!",
    "Use_SurvivalMode": "생존 본능 발동……대가로 영혼이 상했습니다.",
    "Use_PoopCuisine": "신메뉴 해금: 프렌치 똥 플래터 with 오리",
    "Use_DuckBetrayed": "오리는 깊은 배신감을 느꼈습니다……",
    # Food binding
    "FoodBind_AutoBindBurger": "라오바 특제 버거 자동 바인딩됨!",
    "FoodBind_FoundPoop": "가방에서 {0}을(를) 발견했습니다! 악취가 심해요",
    "FoodBind_PoopDetected": "고위험 생물 폐기물 감지!",
    # Binding
    "Binding_Success": "바인딩 성공: {0}",
    "Binding_Success_Short": "{0} 바인딩 완료",
    "Binding_Failed": "바인딩 실패: {0}",
    # Item counts
    "Item_RemainingCount": "남은 개수: {0}",
    "Item_NoMoreItems_1": "이 아이템은 더 이상 없습니다!",
    "Item_NoMoreItems_2": "이건 다 써버렸어요!",
    "Item_NoMoreItems_3": "더 이상 가지고 있지 않습니다!",
    "Item_NoMoreItems_4": "모두 사용되었습니다!",
    "Item_NoMoreItems_5": "없습니다!",
    "Item_NoMoreItems_6": "싹 다 써버렸어요!",
    # Input handling
    "Input_SelectItemFirst": "먼저 아이템을 선택하세요",
    "Input_NoRadialHere": "여기서는 원형 메뉴를 열 수 없습니다!",
    "Input_NoLowValueItem": "버릴 만한 물건을 찾지 못했습니다",
    "Input_LowestValueItem": "가성비 최저는 {0}입니다!",
    "Input_SuggestDrop": "{0}은(는) 버리는 것을 권장합니다!",
    "Input_CannotCarry": "더 이상 들 수 없습니다 — {0}을(를) 버리세요!",
    "Input_NotWorthMoney": "{0}? 값어치가 별로 없네요",
    "Input_HeavyDrop": "너무 무거워요! {0}을(를) 내려놓으세요!",
    "Input_CannotCarryAlt": "가방이 찼어요! {0}을(를) 버리세요~",
    "Input_LeastWorth": "{0}이(가) 가장 쓸모없어요~",
    "Input_AuthorRequest": "원형 메뉴 모드가 마음에 드셨다면 좋아요 부탁드립니다!",
    # Menu
    "Menu_FocusLostClosed": "포커스를 잃어 메뉴가 자동으로 닫혔습니다",
    "Menu_PressToReopen": "{0} 키를 길게 눌러 다시 열기",
    # Food auto-binding
    "Food_AutoBindSector": "구역 {0}에 자동으로 바인딩됨: {1}",
    "Food_PreviousFoodEaten": "이전 음식이 다 소진되었습니다. 이제 {0}을(를) 먹습니다!",
    "Food_TiredOfOld": "예전 음식에 질렸습니다, 드디어 {0}(으)로 교체!",
    "Food_FoundBetter": "더 맛있는 {0}을(를) 찾았습니다! 교체 완료!",
    "Food_CheapDelicious": "{0}은(는) 싸고 맛있습니다!",
}
