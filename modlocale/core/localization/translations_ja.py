"""Japanese translations for the radial menu mod."""

TRANSLATIONS_JA = {
    # Settings screen
    "Settings_Title": "ラジアルメニュー設定",
    # Config option descriptions
    "Config_FoodBindSectors": "食べ物を自動で割り当てるセクター番号",
    "Config_ignoreDurabilityValue": "耐久値がこれ以下の救急箱は使用をスキップ",
    "Config_showLowValueFood": "低価値アイテムの判定に食べ物を含めるか",
    "Config_quickUseLastItemQ": "短押しQで前回のアイテムを素早く使用する",
    "Config_iconSize": "アイコンサイズ",
    "Config_iconDistanceFactor": "アイコンの中心からの距離係数",
    "Config_uiScalePercent": "背景UIの拡大率（％）",
    "Config_innerDeadZoneCoefficient": "内側デッドゾーン係数",
    "Config_outerDeadZoneCoefficient": "外側デッドゾーン係数",
    "Config_longPressQWaitDuration": "ラジアルメニューを出すための長押し時間",
    "Config_UI8style": "8セクターUIスタイル",
    "Config_UI6style": "6セクターUIスタイル",
    "Config_sectorCount": "セクター数",
    "Config_isBulletTimeEnabled": "バレットタイムを有効にする",
    "Config_bulletTimeMultiplier": "バレットタイム時のゲーム速度倍率",
    "Config_radialMenuActivationKey": "ラジアルメニューを開くキー",
    "Config_enableFirstPersonAdaptation": "一人称視点適応を有効にする",
    "Config_firstPersonSensitivity": "一人称での呼び出し感度",
    "Config_enableThirdPersonAdaptation": "三人称視点適応を有効にする",
    "Config_thirdPersonSensitivityMultiplier": "三人称での感度倍率",
    "Config_lockRadialMenuToCenter": "ラジアルメニューを画面中央に固定する",
    "Config_hintOptionsOnly": "以下のオプションはヒントのみで機能しません",
    "Config_radialMenuStuckHint": "メニューが画面に張り付いたら 'Win' キーを押してみてください",
    "Config_haveFunHint": "どうぞ楽しんでください",
    "Config_rightClickCloseRadialMenuHint": "メニューを開いた後、右クリックで素早く閉じられます",
    "Config_disableSpeechBubbles": "アヒルの吹き出しを無効にする",
    "Config_playerHatedTypeIDs": "ブラックリスト食品ID（おすすめリストの最後に配置されます）",
    # UI hints
    "UI_ItemCount": "個数: {0}",
    "UI_BindingNotAllowed": "このアイテムはバインドできません",
    "UI_InstallModConfig": "ワークショップページを確認し、依存MODをインストールしてください",
    "UI_DefaultStyle": "デフォルト",
    "UI_StyleOption": "{0} スタイル",
    "UI_NoStyleDetected": "{0} セクター用の背景が見つかりません。デフォルトを使用します",
    # Log messages
    "Log_RadialMenuInit": "ラジアルメニューの初期化を開始します...",
    "Log_RadialMenuComplete": "ラジアルメニューの初期化が完了しました",
    "Log_BindingComplete": "バインドを永続化しました: Sector={0}, TypeID={1}, DisplayName={2}, autoBound={3}",
    "Log_IconDistanceUpdated": "アイコン距離係数を {0} に更新しました。位置を再計算しています",
    "Log_StyleUnavailable": "スタイル {0} はセクター {1} には利用できません。デフォルト {2} を使用します",
    "Log_LoadingStyle": "{0} セクターの背景を読み込み中、使用スタイル: {1}",
    "Log_SectorAngle": "{0} 個のセクターのアイコン位置を計算しました。各セクター角度: {1}°",
    # Item use feedback
    "Use_ExplosionArt": "爆発こそ芸術！",
    "Use_EatItem": "{0} を食べる！",
    "Use_EquipItem": "{0} を装備する！",
    "Use_UseItem": "{0} を使用する！",
    "Use_HealthRecovered": "体力が回復した！",
    "Use_Ouch": "痛い！治療しないと",
    "Use_ReplaceAfterUse": "使用後に交換します",
    "Use_HealthRemaining": "{0} 回復します",
    "Use_DrinkItem": "{0} を飲む",
    "Use_ColaOverflow": "プシュッ！コーラがあふれた！",
    "Use_ColaDrinking": "ゴクゴクゴク...",
    "Use_TasteItem": "こっそり {0} を一口味見～",
    "Use_ColaByeBye": "コーラが開けば、悩みはさようなら。",
    "Use_Cheers": "乾杯！",
    "Use_DrinkFirst": "まずは一杯！",
    "Use_DrinkForgetWorries": "これを飲んで悩みを忘れてね～",
    "Use_FoodTasty": "{0} はおいしい！",
    "Use_SoFragrant": "いい香り！",
    "Use_HealthFull": "体力が満タンです",
    "Use_StrongDrink": "効きが強い！",
    "Use_DrinkTasty": "とても美味しい！",
    "Use_DrinkSecretly": "{0} をこっそり一口～",
    "Use_FoodCannotUse": "{0} は使用できません",
    "Log_FoodEaten": "食べたもの: {0}",
    "Use_DuckRefusesPoop": "アヒルはそれを食べません！食べ物じゃない！",
    "Use_DontEatDuckPoop": "アヒルにうんちを食べさせないで！",
    "Use_PoopDetected": "不審な物体を検出：高リスク生物廃棄物！",
    "Use_PoopGourmet": "アヒルはグルメではありません。変な趣味はしまわって！",
    "Use_DuckCry": "アヒルが悲しい涙を流した：「私、何をしたの？」",
    "Use_DuckQuestionLife": "アヒルが人生の意味を考え始めた…そしてあなたの行動を。",
    "Use_DuckReputation": "アヒルの評判が99ポイント下がった！",
    "Use_DuckGag": "うっ…アヒルが吐きそう！",
    "Use_DuckCivilRights": "アヒルは基本的な食の権利を求める！",
    "Use_SurvivalMode": "サバイバル本能が発動…代償は魂。",
    "Use_PoopCuisine": "新しい料理アンロック：フレンチ・ポープ（鴨添え）",
    "Use_DuckBetrayed": "アヒルは深く裏切られた気持ちだ…",
    # Food binding
    "FoodBind_AutoBindBurger": "老八の秘製バーガーを自動バインドしました！",
    "FoodBind_FoundPoop": "所持品に{0}の塊を発見！くさい！",
    # Binding
    "Binding_Success": "バインドしました：{0}",
    "Binding_Success_Short": "バインド{0}",
    "Binding_Failed": "バインド失敗：{0}",
    # Item counts
    "Item_RemainingCount": "所持数 {0}",
    "Item_NoMoreItems_1": "所持していません！",
    "Item_NoMoreItems_2": "このアイテムは使い切りました！",
    "Item_NoMoreItems_3": "もうこのアイテムはありません！",
    "Item_NoMoreItems_4": "全部なくなった！",
    "Item_NoMoreItems_5": "残ってない！",
    "Item_NoMoreItems_6": "使い切った！",
    # Input handling
    "Input_SelectItemFirst": "まずアイテムを選択してください",
    "Input_NoRadialHere": "ここではラジアルメニューを開けません！",
    "Input_NoLowValueItem": "低価値アイテムが見つかりません",
    "Input_LowestValueItem": "最も価値重量比が低いのは {0} です！",
    "Input_SuggestDrop": "{0} を捨てることをおすすめします！",
    "Input_CannotCarry": "これ以上持てません。先に {0} を捨ててください～",
    "Input_NotWorthMoney": "{0}？あまり価値がないようです。",
    "Input_HeavyDrop": "重すぎる！{0} を捨てて！",
    "Input_CannotCarryAlt": "これ以上持てません。先に {0} を捨ててください～",
    "Input_LeastWorth": "{0} が一番価値が低いです～",
    "Input_AuthorRequest": "ラジアルメニューにいいねをお願いします、ありがとう！",
    # Menu
    "Menu_FocusLostClosed": "フォーカスを失いました。ラジアルメニューを自動で閉じました",
    "Menu_PressToReopen": "{0} を押し続けてラジアルメニューを再度開く",
    # Food auto-binding
    "Food_AutoBindSector": "セクター {0} に食べ物 {1} を自動バインドしました",
    "Food_PreviousFoodEaten": "前の食べ物は食べられました。今は {0} を食べます！",
    "Food_TiredOfOld": "もう古いのには飽きた。やっと好きな {0} に変えた！",
    "Food_FoundBetter": "より良い {0} を見つけました。交換しました！",
    "Food_CheapDelicious": "{0} は安くておいしい！",
}
